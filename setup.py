from setuptools import setup, find_packages

setup(
    name="gmsdemo",
    version="1.0.0",
    description="ORB feature matching demo comparing GMS filter configurations",
    author="GMS Demo",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["gms_demo"],
    install_requires=[
        "opencv-contrib-python>=4.8.0",
        "numpy>=1.24.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.9",
)
