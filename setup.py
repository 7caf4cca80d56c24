"""
GCPCSAFT
GCPCSAFT: Heterosegmented group-contribution PC-SAFT equation of state and Helmholtz energy functional
"""

from setuptools import find_packages, setup

if __name__ == "__main__":
    setup(
        name="gcpcsaft",
        version="0.1.0",
        description=__doc__.strip().split("\n")[-1],
        packages=find_packages(),
        python_requires=">=3.7",
        install_requires=[
            "numpy",
            "scipy",
            "autograd",
            "networkx",
        ],
        extras_require={
            "test": ["pytest"],
        },
    )
