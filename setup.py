from setuptools import setup, find_packages

setup(
    name="objmesh",
    version="1.0.0",
    description="OBJ (v/vn/f) mesh loader producing renderer-ready buffers",
    packages=find_packages(include=["objmesh", "objmesh.*"]),
    install_requires=[
        "numpy>=1.22.0",
        "PyOpenGL>=3.1.5",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
