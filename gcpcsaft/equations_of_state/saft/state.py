"""
Thermodynamic state in reduced units passed to the Helmholtz energy contributions.
"""

import autograd.numpy as np


class StateHD:
    r"""
    Temperature, volume and amount of each molecule of a homogeneous system.

    Any of the values may carry derivatives.

    Parameters
    ----------
    temperature : float
        Temperature [K]
    volume : float
        Volume [Å^3]
    moles : numpy.ndarray
        Number of molecules of each component

    Attributes
    ----------
    temperature : float
        Temperature [K]
    volume : float
        Volume [Å^3]
    moles : numpy.ndarray
        Number of molecules of each component
    partial_density : numpy.ndarray
        Number density of each component [1/Å^3]
    """

    def __init__(self, temperature, volume, moles):

        self.temperature = temperature
        self.volume = volume
        self.moles = np.array(moles)
        self.partial_density = self.moles / volume

    def __str__(self):
        return "StateHD(temperature={}, volume={}, moles={})".format(self.temperature, self.volume, self.moles)
