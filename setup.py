import os

from setuptools import find_packages, setup

setup(
    name="shapeguard",
    version="0.1.0",
    packages=find_packages(include=["shapeguard", "shapeguard.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.10.6,<3.0.0",
        "typing_extensions>=4.12.2",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "hypothesis>=6.100",
        ],
    },
    author="shapeguard Contributors",
    description="Composable runtime validators for untrusted data",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
)
