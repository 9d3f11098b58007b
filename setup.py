from setuptools import find_packages, setup

setup(
    name="godir",
    version="0.1.0",
    description="godir - fuzzy directory navigation from a list of known directories",
    author="Carlos Justiniano",
    packages=find_packages(include=["godir", "godir.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "typer",  # CLI application
        "click>=8.2",  # Typer runtime where not bundled, separate stderr in CliRunner
        "pydantic>=2",  # Config and output models
        "rich",  # Terminal formatting on stderr
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "godir=godir.cli:main",
        ],
    },
)
