from setuptools import setup, find_packages

setup(
    name="checkout-pricing",
    version="0.1.0",
    description="Checkout totals with 'X for Y' and bulk-discount promotions",
    python_requires=">=3.11",
    packages=find_packages(include=["checkout", "checkout.*", "cr_xmt", "cr_xmt.*"]),
    install_requires=[],
    extras_require={
        "mutation": [
            "cosmic-ray",
            "parso>=0.8",
        ],
        "test": [
            "pytest",
            "pytest-cov",
            "cosmic-ray",
            "parso>=0.8",
        ],
    },
    entry_points={
        "cosmic_ray.operator_providers": [
            "cr_xmt = cr_xmt.provider:Provider",
        ],
        "console_scripts": [
            "cr-filter-coverage = cr_xmt.coverage_filter:main",
        ],
    },
)
