from setuptools import setup, find_packages
import os

install_requires = ["lark", "pydantic>=2"]

# Define optional dependencies for development
extras_require = {"dev": ["pytest"]}

setup(
    name="go-to-speech",
    version="0.1.0",
    packages=find_packages(where=".", exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=install_requires,
    extras_require=extras_require,
    entry_points={
        "console_scripts": [
            "gts = gts.cli:main",
        ],
    },
    include_package_data=True,
    package_data={"gts.parser.core": ["*.lark"]},
    description="Reads the structure of Go source files out loud.",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
)
