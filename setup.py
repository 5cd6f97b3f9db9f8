from setuptools import setup, find_packages

subpkgs = find_packages(where=".")  # finds: star, utils
packages = ["worldsmith"] + ["worldsmith." + p for p in subpkgs]
package_dir = {"worldsmith": "."}
for p in subpkgs:
    package_dir["worldsmith." + p] = p

setup(
    name="worldsmith",
    version="0.1.0",
    description="Main-sequence star parameters from stellar mass",
    python_requires=">=3.8",
    packages=packages,
    package_dir=package_dir,
    install_requires=[
        "numpy",
        "astropy",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
