# -- coding: utf8 --

r"""
Hard sphere contribution to the Helmholtz energy of a mixture of segments.
"""

import logging
import autograd.numpy as np

from gcpcsaft.equations_of_state.numeric import re
from gcpcsaft.equations_of_state.saft.contribution import HelmholtzContribution
from gcpcsaft.equations_of_state.saft import saft_toolbox as stb

logger = logging.getLogger(__name__)


class HardSphere(HelmholtzContribution):
    r"""
    Boublík-Mansoori-Carnahan-Starling-Leland hard sphere mixture.

    :math:`\frac{A^{HS}}{k_B T V} = \frac{6}{\pi}\left(\frac{3\zeta_1\zeta_2}{1-\zeta_3} + \frac{\zeta_2^3}{\zeta_3\left(1-\zeta_3\right)^2} + \left(\frac{\zeta_2^3}{\zeta_3^2}-\zeta_0\right)\ln\left(1-\zeta_3\right)\right)`
    """

    name = "Hard sphere"

    def helmholtz_energy_density(self, temperature, partial_density):

        # Vacuum, the energy density vanishes with a zero first derivative
        if np.all(re(partial_density) == 0.0):
            return 0.0 * np.sum(partial_density)

        diameter = self.parameters.hs_diameter(temperature)
        zeta0, zeta1, zeta2, zeta3 = stb.zeta(self.parameters, diameter, partial_density, [0, 1, 2, 3])
        frac_1mz3 = 1.0 / (1.0 - zeta3)

        return (
            6.0
            / np.pi
            * (
                3.0 * zeta1 * zeta2 * frac_1mz3
                + zeta2 ** 3 * frac_1mz3 ** 2 / zeta3
                + (zeta2 ** 3 / zeta3 ** 2 - zeta0) * np.log1p(-zeta3)
            )
        )
