from setuptools import find_packages, setup

# Basic metadata
VERSION = "0.1.0"

setup(
    name="spxnames",
    version=VERSION,
    description="Validate and generate identifier-safe asset names for spx projects.",
    python_requires=">=3.9",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "typer>=0.9",
        "rich>=13.0",
        "python-dotenv>=1.0",
        "pydantic>=2.0",
        "pydantic-settings>=2.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "spxnames=spxnames.cli.main:app",
        ],
    },
)
