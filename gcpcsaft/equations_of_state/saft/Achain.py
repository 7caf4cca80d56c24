# -- coding: utf8 --

r"""
Hard chain contribution to the Helmholtz energy, summed over the bonds between segments.
"""

import logging
import autograd.numpy as np

from gcpcsaft.equations_of_state.saft.contribution import HelmholtzContribution
from gcpcsaft.equations_of_state.saft import saft_toolbox as stb

logger = logging.getLogger(__name__)


class HardChain(HelmholtzContribution):
    r"""
    Chain formation from the hard sphere pair correlation function at contact of each bonded pair of segments.

    :math:`\frac{A^{HC}}{k_B T V} = -\sum_{\alpha\beta} \rho_{i(\alpha)} n_{\alpha\beta} \ln g_{\alpha\beta}^{HS}`

    :math:`g_{\alpha\beta}^{HS} = \frac{1}{1-\zeta_3} + \frac{d_\alpha d_\beta}{d_\alpha + d_\beta}\frac{3\zeta_2}{\left(1-\zeta_3\right)^2} + \left(\frac{d_\alpha d_\beta}{d_\alpha + d_\beta}\right)^2\frac{2\zeta_2^2}{\left(1-\zeta_3\right)^3}`

    where :math:`n_{\alpha\beta}` is the number of bonds between segments :math:`\alpha` and :math:`\beta`.
    """

    name = "Hard chain"

    def __init__(self, parameters):
        super().__init__(parameters)
        edges = list(parameters.bonds.edges(data="count"))
        self._bond_i = np.array([x[0] for x in edges], dtype=int)
        self._bond_j = np.array([x[1] for x in edges], dtype=int)
        self._bond_count = np.array([x[2] for x in edges], dtype=float)

    def helmholtz_energy_density(self, temperature, partial_density):

        if len(self._bond_count) == 0:
            return 0.0

        p = self.parameters
        diameter = p.hs_diameter(temperature)
        zeta2, zeta3 = stb.zeta(p, diameter, partial_density, [2, 3])

        frac_1mz3 = 1.0 / (1.0 - zeta3)
        c = zeta2 * frac_1mz3 * frac_1mz3

        di = diameter[self._bond_i]
        dj = diameter[self._bond_j]
        cdij = c * di * dj / (di + dj)
        g = frac_1mz3 + 3.0 * cdij + 2.0 * cdij * cdij * (1.0 - zeta3)

        rho = partial_density[p.component_index[self._bond_i]]

        return -np.sum(rho * self._bond_count * np.log(g))
