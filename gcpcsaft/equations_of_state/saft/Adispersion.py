# -- coding: utf8 --

r"""
Dispersion contribution of PC-SAFT applied to a mixture of segments.
"""

import logging
import autograd.numpy as np

from gcpcsaft.equations_of_state.numeric import re
from gcpcsaft.equations_of_state.saft.contribution import HelmholtzContribution
from gcpcsaft.equations_of_state.saft import saft_toolbox as stb

logger = logging.getLogger(__name__)

# Universal constants of the integrals I1 and I2, Gross and Sadowski (2001)
A0 = np.array([0.9105631445, 0.6361281449, 2.6861347891, -26.547362491, 97.759208784, -159.59154087, 91.297774084])
A1 = np.array([-0.3084016918, 0.1860531159, -2.5030047259, 21.419793629, -65.255885330, 83.318680481, -33.746922930])
A2 = np.array([-0.0906148351, 0.4527842806, 0.5962700728, -1.7241829131, -4.1302112531, 13.776631870, -8.6728470368])
B0 = np.array([0.7240946941, 2.2382791861, -4.0025849485, -21.003576815, 26.855641363, 206.55133841, -355.60235612])
B1 = np.array([-0.5755498075, 0.6995095521, 3.8925673390, -17.215471648, 192.67226447, -161.82646165, -165.20769346])
B2 = np.array([0.0976883116, -0.2557574982, -9.1558561530, 20.642075974, -38.804430052, 93.626774077, -29.666905585])


def integrals(m_mean, eta):
    r"""
    Power series approximations of the integrals of the perturbation theory.

    Parameters
    ----------
    m_mean : float
        Mean segment number of the mixture
    eta : float
        Packing fraction

    Returns
    -------
    I1 : float
        First order integral
    I2 : float
        Second order integral
    """

    m1 = (m_mean - 1.0) / m_mean
    m2 = m1 * (m_mean - 2.0) / m_mean
    eta_i = eta ** np.arange(7)

    I1 = np.sum((A0 + m1 * A1 + m2 * A2) * eta_i)
    I2 = np.sum((B0 + m1 * B1 + m2 * B2) * eta_i)

    return I1, I2


class Dispersion(HelmholtzContribution):
    r"""
    Dispersion from the integrated perturbation theory of second order.

    :math:`\frac{A^{disp}}{k_B T V} = -2\pi \rho^2 \overline{m^2 \epsilon \sigma^3} I_1 - \pi \rho \bar{m} C_1 \rho^2 \overline{m^2 \epsilon^2 \sigma^3} I_2`

    where the mixture averages run over all pairs of segments with the combining rule matrices ``sigma_ij`` and ``epsilon_k_ij``.
    """

    name = "Dispersion"

    def helmholtz_energy_density(self, temperature, partial_density):

        if np.all(re(partial_density) == 0.0):
            return 0.0 * np.sum(partial_density)

        p = self.parameters
        diameter = p.hs_diameter(temperature)
        eta = stb.zeta(p, diameter, partial_density, [3])[0]

        rho_m = partial_density[p.component_index] * p.m
        m_mean = np.sum(rho_m) / np.sum(partial_density)

        e_ij = p.epsilon_k_ij / temperature
        s3_ij = p.sigma_ij ** 3
        rho1mix = np.dot(rho_m, np.dot(e_ij * s3_ij, rho_m))
        rho2mix = np.dot(rho_m, np.dot(e_ij * e_ij * s3_ij, rho_m))

        I1, I2 = integrals(m_mean, eta)

        eta_m2 = (eta - 2.0) ** 2
        c1 = 1.0 / (
            1.0
            + m_mean * (8.0 * eta - 2.0 * eta ** 2) / (1.0 - eta) ** 4
            + (1.0 - m_mean) * (20.0 * eta - 27.0 * eta ** 2 + 12.0 * eta ** 3 - 2.0 * eta ** 4)
            / ((1.0 - eta) ** 2 * eta_m2)
        )

        return -2.0 * np.pi * rho1mix * I1 - np.pi * m_mean * c1 * I2 * rho2mix
