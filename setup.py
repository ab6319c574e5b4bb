from setuptools import setup, find_packages

setup(
    name="amflow",
    version="0.1.0",
    packages=find_packages(where="src", exclude=["tests", "tests.*"]),
    package_dir={"": "src"},
    install_requires=[
        "pydantic>=2",
        "networkx",
        "graphviz",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.8",
    # Add metadata for PyPI
    description="workflow graph construction and visualization for Archivematica workflow documents",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
)
