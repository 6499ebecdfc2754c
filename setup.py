from setuptools import find_packages, setup

setup(
    name="jwtlic",
    version="0.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "PyJWT>=2.0",
        "cryptography",
        "pydantic>=2.0",
        "click",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "jwtlic=jwtlic.cli:cli",
        ],
    },
)
