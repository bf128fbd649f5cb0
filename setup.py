from setuptools import find_packages, setup

setup(
    name="mdlinks",
    version="0.3.0",
    description="Markdown link integrity checker - find and repair broken relative links",
    packages=find_packages(include=["mdlinks", "mdlinks.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "typer",  # CLI apps and the active command context
        "rich",  # Terminal formatting
        "pydantic>=2",  # Config and output schemas
        "jinja2",  # Template rendering for summaries and reports
        "PyYAML",  # Frontmatter parsing and YAML output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "mdlc=mdlinks.cli:main",
        ],
    },
)
