from setuptools import find_packages, setup

setup(
    name="postmore",
    version="0.1.0",
    description="Read-more excerpt filter for Jinja2 templates",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "jinja2",  # Host templating engine
        "markupsafe",  # Safe link markup under autoescape
        "pydantic>=2",  # Config and command output schemas
        "typer<0.26",  # CLI (0.26+ vendors click; code catches real click exceptions)
        "click",  # Exit and usage error types raised through typer
        "rich",  # Terminal formatting
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
        ],
    },
    entry_points={
        "console_scripts": [
            "postmore=postmore.cli:main",
        ],
    },
)
