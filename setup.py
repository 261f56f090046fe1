from setuptools import find_namespace_packages, setup

PACKAGE_NAME = "fast_hash"

install_requires = [
    "PyYAML>=6.0",
]
test_requires = [
    "pytest>=7.4",
]

setup(
    name="fast-hash",
    version="0.1.0",
    description="Streaming SHA-256 file digest with byte count for evidence collection",
    packages=find_namespace_packages(include=(PACKAGE_NAME, f"{PACKAGE_NAME}.*")),
    include_package_data=False,
    python_requires=">=3.10",
    install_requires=install_requires,
    extras_require={"test": test_requires},
    entry_points={
        "console_scripts": [
            "fast-hash=fast_hash.cli.app:main",
        ]
    },
)
