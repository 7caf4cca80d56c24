# -- coding: utf8 --

r"""
Association contribution to the Helmholtz energy.

Each associating segment carries ``na`` sites of type A and ``nb`` sites of type B. Sites of type A only bond with sites of type B, unless a segment carries a single type of site, in which case its sites bond with each other and with those of other segments with a single type. A single associating segment is solved in closed form, while several associating segments require the iterative solution of the fraction of non-bonded sites, see :func:`solve_site_fractions`.
"""

import logging
import autograd.numpy as np

from gcpcsaft.exceptions import NotConvergedError
from gcpcsaft.equations_of_state.numeric import re, derivative_order
from gcpcsaft.equations_of_state.saft.contribution import HelmholtzContribution
from gcpcsaft.equations_of_state.saft import saft_toolbox as stb

logger = logging.getLogger(__name__)

# Below this product of association strength and density the closed form expressions lose precision
SQRT_EPS = np.sqrt(np.finfo(float).eps)


def association_strength(parameters, temperature, diameter, n2, n3i):
    r"""
    Association strength between each pair of associating segments.

    :math:`\Delta_{ij} = \frac{1}{1-\zeta_3}\left(k_{ij}\left(\frac{k_{ij}}{18}+\frac{1}{2}\right)+1\right) \sigma_{ij}^3 \kappa_{ij} \left(\exp\left(\frac{\epsilon_{ij}^{AB}}{k_B T}\right)-1\right)`

    with :math:`k_{ij} = \frac{d_i d_j}{d_i + d_j} \frac{6 \zeta_2}{1-\zeta_3}`.

    Parameters
    ----------
    parameters : ParameterSet
        Assembled parameters
    temperature : float
        Temperature [K]
    diameter : numpy.ndarray
        Temperature dependent diameter of each segment [Å]
    n2 : float
        :math:`6\zeta_2`
    n3i : float
        :math:`1/(1-\zeta_3)`

    Returns
    -------
    delta : numpy.ndarray
        Association strength matrix [Å^3]
    """

    p = parameters
    d = diameter[p.assoc_segment]
    k = d[:, None] * d[None, :] / (d[:, None] + d[None, :]) * (n2 * n3i)

    return n3i * (k * (k / 18.0 + 0.5) + 1.0) * p.sigma3_kappa_aibj * np.expm1(p.epsilon_k_aibj / temperature)


def assoc_site_frac_a(deltarho, na):
    r"""
    Fraction of non-bonded sites of a segment with a single type of site that bonds with itself.

    :math:`X = \frac{2}{1 + \sqrt{1 + 4 n_A \Delta\rho}}`

    A series expansion is used for small :math:`\Delta\rho`.

    Parameters
    ----------
    deltarho : float
        Product of association strength and density
    na : float
        Number of sites

    Returns
    -------
    xa : float
        Fraction of non-bonded sites
    """

    if re(deltarho) > SQRT_EPS:
        return 2.0 / (1.0 + np.sqrt(1.0 + 4.0 * deltarho * na))
    else:
        return 1.0 + deltarho * na * (2.0 * deltarho * na - 1.0)


def assoc_site_frac_ab(deltarho, na, nb):
    r"""
    Fraction of non-bonded sites of type A of a segment with sites of type A and B.

    :math:`X_A = \frac{2}{\sqrt{\left(1 + \left(n_A - n_B\right)\Delta\rho\right)^2 + 4 n_B \Delta\rho} + 1 + \left(n_B - n_A\right)\Delta\rho}`

    A series expansion is used for small :math:`\Delta\rho`.

    Parameters
    ----------
    deltarho : float
        Product of association strength and density
    na : float
        Number of sites of type A
    nb : float
        Number of sites of type B

    Returns
    -------
    xa : float
        Fraction of non-bonded sites of type A
    """

    if re(deltarho) > SQRT_EPS:
        root = np.sqrt((deltarho * (na - nb) + 1.0) ** 2 + 4.0 * deltarho * nb)
        return 2.0 / (root + deltarho * (nb - na) + 1.0)
    else:
        return 1.0 + deltarho * nb * (deltarho * (nb + na) - 1.0)


def _site_term(x):
    return np.log(x) - 0.5 * x + 0.5


def site_classes(na, nb):
    r"""
    Split the association sites into the classes used by the cross association solver.

    Sites of a segment with both types of site bond across types, A with B. Sites of a segment with a single type of site bond with the sites of all other segments with a single type of site.

    Parameters
    ----------
    na : numpy.ndarray
        Number of sites of type A of each associating segment
    nb : numpy.ndarray
        Number of sites of type B of each associating segment

    Returns
    -------
    na_ab : numpy.ndarray
        Number of sites of type A of segments with both types
    nb_ab : numpy.ndarray
        Number of sites of type B of segments with both types
    nc : numpy.ndarray
        Number of sites of segments with a single type
    """

    single = (na == 0.0) | (nb == 0.0)
    na_ab = np.where(single, 0.0, na)
    nb_ab = np.where(single, 0.0, nb)
    nc = np.where(single, na + nb, 0.0)

    return na_ab, nb_ab, nc


def newton_step(x, delta, na, nb, nc, rho):
    r"""
    Single Newton-Raphson step for the fractions of non-bonded sites.

    The residuals are

    :math:`g_{A,i} = \frac{1}{X_{A,i}} - 1 - \sum_j \Delta_{ij} \rho_j n_{B,j} X_{B,j}`, :math:`g_{B,i} = \frac{1}{X_{B,i}} - 1 - \sum_j \Delta_{ij} \rho_j n_{A,j} X_{A,j}` and :math:`g_{C,i} = \frac{1}{X_{C,i}} - 1 - \sum_j \Delta_{ij} \rho_j n_{C,j} X_{C,j}`

    Parameters
    ----------
    x : numpy.ndarray
        Fractions of non-bonded sites of type A, followed by those of type B and those of segments with a single type
    delta : numpy.ndarray
        Association strength matrix [Å^3]
    na : numpy.ndarray
        Number of sites of type A of each associating segment with both types
    nb : numpy.ndarray
        Number of sites of type B of each associating segment with both types
    nc : numpy.ndarray
        Number of sites of each associating segment with a single type
    rho : numpy.ndarray
        Number density of each associating segment [1/Å^3]

    Returns
    -------
    x_new : numpy.ndarray
        Updated fractions
    residual : float
        Norm of the residuals at ``x``, without derivatives
    """

    nassoc = len(na)
    xa = x[:nassoc]
    xb = x[nassoc : 2 * nassoc]
    xc = x[2 * nassoc :]

    delrho = delta * rho[None, :]
    dnx_a = np.dot(delrho, xb * nb) + 1.0
    dnx_b = np.dot(delrho, xa * na) + 1.0
    dnx_c = np.dot(delrho, xc * nc) + 1.0

    g = np.concatenate([1.0 / xa - dnx_a, 1.0 / xb - dnx_b, 1.0 / xc - dnx_c])
    zero = np.zeros((nassoc, nassoc))
    jacobian = np.concatenate(
        [
            np.concatenate([np.diag(-dnx_a / xa), -delrho * nb[None, :], zero], axis=1),
            np.concatenate([-delrho * na[None, :], np.diag(-dnx_b / xb), zero], axis=1),
            np.concatenate([zero, zero, np.diag(-dnx_c / xc) - delrho * nc[None, :]], axis=1),
        ],
        axis=0,
    )

    return x - np.linalg.solve(jacobian, g), np.linalg.norm(re(g))


def solve_site_fractions(delta, na, nb, rho, max_iter=50, tol=1e-10):
    r"""
    Fractions of non-bonded association sites of several associating segments.

    Newton's method is iterated on the values alone until the norm of the residuals is below ``tol``. The derivatives are then recovered by repeating the Newton step from the converged values, once for each order of derivative carried by ``delta`` and ``rho``.

    Parameters
    ----------
    delta : numpy.ndarray
        Association strength matrix [Å^3]
    na : numpy.ndarray
        Number of sites of type A of each associating segment
    nb : numpy.ndarray
        Number of sites of type B of each associating segment
    rho : numpy.ndarray
        Number density of each associating segment [1/Å^3]
    max_iter : int, Optional, default=50
        Maximum number of Newton iterations
    tol : float, Optional, default=1e-10
        Tolerance of the norm of the residuals

    Returns
    -------
    x : numpy.ndarray
        Fractions of non-bonded sites of type A, followed by those of type B and those of segments with a single type, see :func:`site_classes`. Entries of a class a segment does not have are one.
    """

    na, nb, nc = site_classes(na, nb)
    delta_re = re(delta)
    rho_re = re(rho)

    x = 0.2 * np.ones(3 * len(na))
    for i in range(max_iter):
        x, residual = newton_step(x, delta_re, na, nb, nc, rho_re)
        if residual < tol:
            logger.debug("Cross association converged in {} iterations".format(i + 1))
            break
    else:
        raise NotConvergedError("cross association", max_iter)

    for _ in range(derivative_order(delta, rho)):
        x, _ = newton_step(x, delta, na, nb, nc, rho)

    return x


class Association(HelmholtzContribution):
    r"""
    Association of a single associating segment, solved in closed form.

    :math:`\frac{A^{assoc}}{k_B T V} = \rho \left(n_A\left(\ln X_A - \frac{X_A}{2} + \frac{1}{2}\right) + n_B\left(\ln X_B - \frac{X_B}{2} + \frac{1}{2}\right)\right)`
    """

    name = "Association"

    def __init__(self, parameters):
        super().__init__(parameters)
        if len(parameters.assoc_segment) != 1:
            raise ValueError(
                "Closed form association requires exactly one associating segment, {} were given".format(
                    len(parameters.assoc_segment)
                )
            )

    def helmholtz_energy_density(self, temperature, partial_density):

        p = self.parameters
        diameter = p.hs_diameter(temperature)
        zeta2, zeta3 = stb.zeta(p, diameter, partial_density, [2, 3])
        delta = association_strength(p, temperature, diameter, 6.0 * zeta2, 1.0 / (1.0 - zeta3))

        rho = partial_density[p.component_index[p.assoc_segment[0]]] * p.n[0]
        deltarho = delta[0, 0] * rho
        na = p.na[0]
        nb = p.nb[0]

        if na > 0.0 and nb > 0.0:
            xa = assoc_site_frac_ab(deltarho, na, nb)
            xb = (xa - 1.0) * na / nb + 1.0
            return rho * (_site_term(xa) * na + _site_term(xb) * nb)
        else:
            # Only one type of site, which bonds with itself
            n = na + nb
            xa = assoc_site_frac_a(deltarho, n)
            return rho * _site_term(xa) * n


class CrossAssociation(HelmholtzContribution):
    r"""
    Association of several associating segments, solved iteratively.

    Parameters
    ----------
    parameters : ParameterSet
        Assembled parameters
    max_iter : int, Optional, default=50
        Maximum number of Newton iterations
    tol : float, Optional, default=1e-10
        Tolerance of the norm of the residuals
    """

    name = "Cross-association"

    def __init__(self, parameters, max_iter=50, tol=1e-10):
        super().__init__(parameters)
        self.max_iter = max_iter
        self.tol = tol

    def helmholtz_energy_density(self, temperature, partial_density):

        p = self.parameters
        nassoc = len(p.assoc_segment)
        diameter = p.hs_diameter(temperature)
        zeta2, zeta3 = stb.zeta(p, diameter, partial_density, [2, 3])
        delta = association_strength(p, temperature, diameter, 6.0 * zeta2, 1.0 / (1.0 - zeta3))

        rho = partial_density[p.component_index[p.assoc_segment]] * p.n
        x = solve_site_fractions(delta, p.na, p.nb, rho, max_iter=self.max_iter, tol=self.tol)
        xa = x[:nassoc]
        xb = x[nassoc : 2 * nassoc]
        xc = x[2 * nassoc :]
        na, nb, nc = site_classes(p.na, p.nb)

        return np.sum(rho * (_site_term(xa) * na + _site_term(xb) * nb + _site_term(xc) * nc))


def association_contribution(parameters, max_iter=50, tol=1e-10):
    r"""
    Association contribution matching the number of associating segments.

    Parameters
    ----------
    parameters : ParameterSet
        Assembled parameters
    max_iter : int, Optional, default=50
        Maximum number of Newton iterations of cross association
    tol : float, Optional, default=1e-10
        Tolerance of cross association

    Returns
    -------
    contribution : HelmholtzContribution
        None without associating segments, :class:`Association` for one associating segment and :class:`CrossAssociation` otherwise
    """

    nassoc = len(parameters.assoc_segment)
    if nassoc == 0:
        return None
    elif nassoc == 1:
        return Association(parameters)
    else:
        return CrossAssociation(parameters, max_iter=max_iter, tol=tol)
