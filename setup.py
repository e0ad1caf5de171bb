from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="routegraph",
    version="0.1.0",
    description="Shortest routes on undirected Euclidean graphs with image export.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "dev", "examples")),
    python_requires=">=3.9",
    install_requires=["networkx", "matplotlib"],
    extras_require={"dev": ["pytest"]},
    entry_points={"console_scripts": ["routegraph=routegraph.cli:main"]},
)
