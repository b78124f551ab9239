from setuptools import find_packages, setup

if __name__ == "__main__":
    setup(
        name="tapcrypto",
        version="0.1.0",
        description="TAP protocol message signing and self-verification",
        packages=find_packages(where="src"),
        package_dir={"": "src"},
        python_requires=">=3.9",
        install_requires=["coincurve>=18"],
        extras_require={"test": ["pytest"]},
    )
