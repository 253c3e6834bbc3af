from setuptools import setup, find_packages

common_dependencies = [
    "python-dotenv",
]

setup(
    name="strscan",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=common_dependencies,
    extras_require={
        "dev": [
            "coverage",
            "flake8",
            "black",
            "isort",
            "pytest",
            "pytest-cov",
        ],
    },
    python_requires=">=3.8",
    description="Cursor-based string scanning for lexers and incremental parsers",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
)
