# SPDX-FileCopyrightText: 2025 vsskit contributors
# SPDX-License-Identifier: MIT

from setuptools import find_packages, setup

setup(
    name="vsskit",
    version="0.1.0",
    description="Verifiable secret sharing, Sigma proofs and threshold ElGamal decryption",
    author="vsskit contributors",
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "cryptography<49,>=41.0",
        "pynacl<2.0,>=1.5",
    ],
    extras_require={
        "test": [
            "pytest>=8.0.0",
            "hypothesis>=6.0.0",
        ],
    },
)
