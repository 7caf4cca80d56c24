"""
Contains constants used in the other files.

Helmholtz energies are evaluated in reduced units: lengths in Angstrom, number densities in molecules per cubic Angstrom and temperature in Kelvin.
"""

# physical constants

kb = 1.380649e-23  # Boltzmann constant J/K
h = 6.62607015e-34  # Planck's constant J*S
Nav = 6.02214076e23  # Avogadro's number
R = kb * Nav  # Gas constant J/ ( mol*K)

# unit conversion

Atometer = 1.0e-10  # conversion of angstroms to meters
m3toA3 = 1.0e30  # cubic meters to cubic angstroms
reference_pressure = kb * m3toA3  # Pa per K/A^3

# ideal gas reference state

T0 = 298.15  # K
p0 = 1.0e5  # Pa
