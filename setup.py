import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

with open("decint/version.py", "r") as fh:
    version = fh.read().strip().strip('"')

setuptools.setup(
    name="decint",
    version=version,
    description="Arbitrary-precision signed integers stored as decimal digits.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(),
    platforms=['any'],
    python_requires='>=3.6',
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: CC0 1.0 Universal (CC0 1.0) Public Domain Dedication",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Mathematics",
            # big integers
            # long division
            # newton's method
    ],
)
