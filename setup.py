from setuptools import find_packages, setup

setup(
    name="imgup",
    version="0.3.0",
    description="Upload vault images to an image host and rewrite note references",
    author="William Wieselquist",
    packages=find_packages(include=["imgup", "imgup.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Config and output schemas
        "typer<0.26",  # CLI (0.26+ vendors click; code uses click.get_current_context)
        "click",  # CLI context handling
        "rich",  # Terminal formatting
        "PyYAML",  # YAML output
        "requests",  # Upload backend HTTP calls
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
            "types-requests",  # Type stubs
            "types-PyYAML",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "imgup=imgup.cli:main",
        ],
    },
)
