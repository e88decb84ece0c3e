# setup.py
from setuptools import setup, find_packages

setup(
    name="vecs3d",
    version="1.0.0",
    description="vecs3d: single-precision 3D vector type",
    packages=find_packages(include=["vecs3d", "vecs3d.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
