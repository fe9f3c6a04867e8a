from setuptools import setup, find_packages

setup(
    name="slice_sandbox",
    version="0.1.0",
    description="A 2D physics sandbox for slicing polygon bodies along a drawn line",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    package_data={
        "slice_sandbox": ["scenes/*.json"],
    },
    install_requires=[
        "pymunk>=6.6,<8",
        "pygame>=2.5",
        "numpy>=1.24",
        "shapely>=2.0",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "slice_sandbox=slice_sandbox.main:main",
        ],
    },
)
