"""Setup script for twilight_lib."""

from setuptools import find_packages, setup

if __name__ == "__main__":
    setup(
        name="twilight_lib",
        version="0.1.0",
        description="Limelight and navX sensor wrappers for FRC robots",
        python_requires=">=3.10",
        package_dir={"": "src"},
        packages=find_packages(where="src"),
        install_requires=[
            "colorify",
            "psutil",
            "pyntcore",
            "robotpy-commands-v2",
            "robotpy-navx",
        ],
        extras_require={
            "test": ["pytest"],
        },
    )
