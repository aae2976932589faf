from setuptools import find_packages, setup


setup(
    name="tridiag",
    version='1.0',
    description="Symmetric and general tridiagonal matrices with linear-time kernels, implemented in Numpy and Scipy.",
    author="James A. Brofos",
    author_email="james@brofos.org",
    url="http://brofos.org",
    keywords="linear algebra tridiagonal banded matrix determinant eigenvalues",
    packages=find_packages(include=['tridiag', 'tridiag.*']),
    install_requires=['numpy', 'scipy'],
)
