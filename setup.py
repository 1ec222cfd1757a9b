from setuptools import setup, find_packages

setup(
    name="concord",
    version="0.1.0",
    description="Inter-annotator agreement (Cohen's Kappa) for multi-worker labeling",
    author="concord Team",
    packages=find_packages(include=["concord", "concord.*"]),
    install_requires=[
        "numpy>=1.24.0",
        "pandas>=2.0.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "scikit-learn>=1.2.0",
        ],
    },
)
