#!/usr/bin/env python3

from setuptools import setup

setup(
    author="Elias Zamaria",
    description="Mersenne Twister random number generators (MT19937 and MT19937-64).",
    extras_require={"test": ["pytest"]},
    install_requires="pycryptodomex >= 3.4.2",
    license="MIT",
    name="mersenne-twister",
    py_modules=["benchmark", "mersenne_twister", "rng_tools", "util"],
    python_requires=">=3.5",
    url="https://github.com/mikez302/cryptopals_solutions",
    version="0.1.0",
)
