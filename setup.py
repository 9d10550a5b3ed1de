from setuptools import find_packages, setup

setup(
    name="droid-patch",
    version="0.1.0",
    description="droid-patch - patch the droid CLI binary and install it as an alias",
    packages=find_packages(include=["droid_patch", "droid_patch.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "typer",  # CLI framework
        "click",  # Context lookup for the display format
        "rich",  # Terminal formatting
        "pydantic>=2",  # Config and output schema validation
        "pyyaml",  # YAML output format
        "pygments",  # Syntax highlighting for terminal output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "droid-patch=droid_patch.cli:main",
        ],
    },
)
