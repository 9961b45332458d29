from setuptools import setup

name = "focalmaker"
version = "0.1"
release = "0.01"
author = "Jose A. Abell, Jorge Crempien D., and Matias Recabarren"


setup(
    name = name,
    package_dir = {
        'focalmaker' : 'focalmaker'
    },
    packages = [
        "focalmaker",
        "focalmaker.gf_extensions",
        "focalmaker.sw_extensions",
        "focalmaker.tools",
        ],
    python_requires = ">=3.9",
    install_requires = [
        "numpy",
        "scipy",
        "h5py",
        "matplotlib",
        ],
    extras_require = {
        "test": ["pytest"],
        },
    version = version,
    description = "Focal mechanisms and synthetic seismograms of earthquake point sources",
    author = author,
    author_email = "info@joseabell.com",
    url = "http://www.joseabell.com",
    download_url = "tbd",
    keywords = ["earthquake", "focal mechanism", "moment tensor", "beachball", "green's functions", "seismogram"],
    classifiers = [
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Development Status :: 4 - Beta",
        "Environment :: Other Environment",
        "Intended Audience :: Science/Research",
        "Operating System :: OS Independent",
        "Topic :: Scientific/Engineering :: Physics",
        ],
    long_description = """\
        focalmaker
        -------------------------------------

        Beachballs and synthetic seismograms from strike, dip, rake and magnitude.

        """,
)
