from setuptools import find_packages, setup

NAME = 'sigprep'

VERSION = '0.1.0a'
GENERAL_REQUIRES = [
    'numpy>=1.22',
    'scipy>=1.9',
    'numba>=0.56',
    'matplotlib>=3.5',
    ]

EXTRAS_REQUIRES = {
    'tests': ['pytest'],
}

setup(
    name=NAME,
    version=VERSION,
    packages=find_packages(exclude=['tests', 'tests.*']),
    include_package_data=True,
    zip_safe=True,
    description='Offline conditioning of uniformly-sampled time series',
    install_requires=GENERAL_REQUIRES,
    extras_require=EXTRAS_REQUIRES,
    python_requires='>=3.8',
    classifiers=[
        'Development Status :: 2 - Pre-Alpha',
        'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
        'Natural Language :: English',
        'Programming Language :: Python :: 3 :: Only',
        'Topic :: Scientific/Engineering :: Bio-Informatics'
    ],
)
