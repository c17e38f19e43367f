import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="fmtpack",
    version="0.0.1",
    author="Gianluca Pacchiella",
    author_email="gp@ktln2.org",
    description="Fixed binary layouts from a format string",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/gipi/fmtpack",
    packages=setuptools.find_packages(exclude=['tests']),
    scripts=['scripts/fmtdump.py'],
    install_requires=[
        'bitstring<5',
    ],
    extras_require={
        'test': ['pytest'],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GPLv2 License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.8',
)
