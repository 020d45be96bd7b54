from setuptools import find_packages, setup

setup(
    name="noteweave",
    version="0.1.0",
    description="Obsidian wikilink resolution and recursive embed rendering for Markdown vaults",
    packages=find_packages(include=["noteweave", "noteweave.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Configuration and output models
        "typer<0.26",  # CLI (0.26+ vendors click; display format is read via click context)
        "click",  # Display-format lookup on the active CLI context
        "rich",  # Terminal formatting
        "PyYAML",  # YAML display output
        "markdown-it-py>=3.0",  # Markdown to HTML rendering
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "noteweave=noteweave.cli:main",
        ],
    },
)
