from setuptools import setup, find_packages

setup(
    name="pybuildcpp",
    description="A project generator and build driver for C++",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    keywords=["c++", "build"],
    python_requires=">=3.11",
    packages=find_packages(exclude=("tests", "tests.*")),
    install_requires=[
        "returns",
        "toml",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "pybuildcpp = pybuildcpp.main:main",
            "pybuildcpp-build = pybuildcpp.driver:main",
        ]
    },
    use_scm_version={
        "write_to": "pybuildcpp/__version__.py",
        "fallback_version": "0.1.0",
    },
)
