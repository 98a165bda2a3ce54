from setuptools import find_packages, setup


setup(
    name="replica-client",
    version="0.1.0",
    description="Synchronous client for the Replica Studios text-to-speech API.",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.9",
    install_requires=[
        "pydantic>=2.6",
        "pydantic-settings>=2.2",
        "httpx>=0.27",
        "structlog>=24.1",
        "rich>=13.7",
    ],
    extras_require={
        "dev": ["pytest>=8.0", "ruff>=0.6", "mypy>=1.8"],
    },
)
