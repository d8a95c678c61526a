from setuptools import setup, find_packages
import os

resources_dir = os.path.join('resources')
datafiles = [(d, [os.path.join(d, f) for f in files])
             for d, folders, files in os.walk(resources_dir)]

classifiers = """\
Development Status :: 3 - Alpha
Intended Audience :: Developers
Intended Audience :: Education
Intended Audience :: Science/Research
Topic :: Scientific/Engineering :: Artificial Intelligence
Topic :: Scientific/Engineering :: Mathematics
Programming Language :: Python
Programming Language :: Python :: 3
Operating System :: OS Independent"""

PREREQS = ['numpy>=1.17',
           'scipy>=1.4',
           'scikit-learn>=0.23',
           'pandas>=1.4',
           ]

TEST_PREREQS = ['pytest>=6']

setup(
    name='classiris',
    version='0.1.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    license="GNU General Public License (GPL)",
    platforms="any",
    description='Decision tree, k-nearest neighbours and Gaussian naive Bayes '
                'classifiers cross-validated on the Iris data set.',
    long_description=open('README.rst').read(),
    classifiers=classifiers.split('\n'),
    python_requires='>=3.7',
    install_requires=PREREQS,
    extras_require={'test': TEST_PREREQS},
    entry_points={
        'console_scripts': [
            'dt-iris = classiris.drivers:dt_iris',
            'knn-iris = classiris.drivers:knn_iris',
            'nb-iris = classiris.drivers:nb_iris',
        ],
    },
    data_files=datafiles
)
