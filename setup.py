import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="intersect3d",
    version="0.1",
    description="Intersection of line segments in 3D space, by parametric solve and per-axis tolerance check",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    scripts=["bin/cli/intersect_segments.py"],
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.10',
    install_requires=[
        "attrs",
        "expression",
        "gertils",
        "numpy",
        "numpydoc_decorator",
        "pyyaml",
    ],
    extras_require={
        "test": ["hypothesis", "pytest"],
    },
)
