from setuptools import setup, find_packages

setup(
    name="post-meta",
    version="0.1.0",
    description="Copy and delete post metadata in a host metadata store",
    author="Your Name",
    author_email="your.email@example.com",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    install_requires=[
        "pandas>=1.0.0",
        "pyarrow>=3.0.0",
        "fsspec>=2021.6.0",
        "mmh3>=3.0.0",  # MurmurHash for metadata fingerprints
    ],
    extras_require={
        "dev": [
            "pytest>=6.0.0",
            "black>=21.5b2",
            "pylint>=2.8.0",
        ],
    },
    python_requires=">=3.7",
)
