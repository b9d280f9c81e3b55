# setup.py
from setuptools import find_namespace_packages, setup

setup(
    name="sizetree",
    version="1.0.0",
    description="Size-aggregating directory tree rebuilt from cd/ls transcripts, with a frame-stack walker",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["sizetree", "sizetree.*"]),
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "sizetree=sizetree.main:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
