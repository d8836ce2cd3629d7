from setuptools import setup, find_packages

with open("README.rst", 'r') as file_handle:
    long_description = file_handle.read()

setup(
    name = "UmbrellaMBAR",
    version = "0.1.0",
    description = "MBAR free energies of umbrella-windowed simulations",
    long_description = long_description,
    long_description_content_type = "text/x-rst",
    packages = find_packages(exclude=["test", "examples"]),
    install_requires=['numpy>=1.14.0',
                      'scipy>=1.1.0',
                      'torch>=1.11.0'],
    extras_require={'test': ['pytest']},
    license = 'MIT',
    classifiers = [
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
