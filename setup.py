from setuptools import setup, find_packages

setup(
    name="intmatrix",
    version="1.0",
    description="Dense matrix container over integral element types",
    long_description=("Dense two-dimensional matrix container over integral element types with bounds-checked "
                      "access, constant-time transposition of the storage order, matrix and scalar multiplication, "
                      "and numpy, scipy and sympy interoperability"),
    long_description_content_type="text/plain",
    author="intmatrix contributors",
    license="Apache License 2.0",
    python_requires=">=3.9",
    packages=find_packages(include=["intmatrix", "intmatrix.*"]),
    install_requires=["numpy", "scipy", "sympy"],
    extras_require={"test": ["pytest", "pytest-timeout"]},
    classifiers=[
        "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10", "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["matrix", "integer", "linear algebra", "transpose"],
    zip_safe=False,
)
