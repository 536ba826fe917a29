"""zpoly setup script.

Options:                python setup.py --help
Install by admin/root:  python setup.py install
Install by user:        python setup.py install --user
Install options:        python setup.py install --help
"""

from setuptools import setup
import zpoly

with open('README.md', 'r') as f:
    LONG_DESCRIPTION = f.read()

setup(
    name='zpoly',
    version=zpoly.__version__,
    description='zpoly -- Polynomials over the integers and finite fields',
    long_description=LONG_DESCRIPTION,
    long_description_content_type='text/markdown',
    keywords=['polynomials', 'finite fields', 'computer algebra', 'gcd',
              'irreducible polynomials', "Rabin's irreducibility test"],
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Intended Audience :: Education',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3 :: Only',
        'Topic :: Scientific/Engineering :: Mathematics',
        'Topic :: Software Development :: Libraries :: Python Modules'
    ],
    license=zpoly.__license__,
    packages=['zpoly'],
    platforms=['any'],
    install_requires=['gmpy2>=2.1'],
    extras_require={'test': ['pytest']},
    python_requires='>=3.9'
)
