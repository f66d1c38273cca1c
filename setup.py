from setuptools import setup, find_packages

setup(
    name="graphql-json-transport",
    version="0.1.0",
    packages=find_packages(where="src", include=["gqltransport", "gqltransport.*"]),
    package_dir={"": "src"},
    install_requires=[
        "fastapi>=0.110",
        "starlette>=0.36",
        "pydantic>=2.5",
        "graphql-core>=3.2,<3.3",
        "structlog>=23.1",
        "python-dotenv>=1.0",
        "PyYAML>=6.0",
        "uvicorn>=0.27",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
            "httpx>=0.26",
        ],
    },
    entry_points={
        "console_scripts": [
            "gqltransport=gqltransport.core.cli:main",
        ],
    },
    description="GraphQL over JSON POST transport for FastAPI applications.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)
