from setuptools import find_packages, setup

setup(
    name="telereset",
    version="0.1.0",
    description="Client for the editor machine-ID telemetry reset backend",
    packages=find_packages(include=["telereset", "telereset.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "httpx",  # Backend HTTP client
        "pydantic>=2",  # Config, envelope and output schemas
        "typer<0.26",  # CLI; 0.26+ vendors its own click, which breaks the click imports below
        "click",  # Context and exception types used by the CLI
        "rich",  # Terminal formatting
        "pyyaml",  # YAML output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-asyncio>=0.23",  # Async tests
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "telereset=telereset.cli:main",
        ],
    },
)
