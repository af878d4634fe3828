import setuptools

with open('README.md') as f:
    description = f.read()

setuptools.setup(
    packages = setuptools.find_packages(include = ['kelvinline', 'kelvinline.*']),

    install_requires = ['numpy', 'scipy', 'attrs', 'joblib'],
    extras_require = {
        'derive': ['sympy'],
        'test': ['pytest', 'sympy', 'mpmath'],
    },
    zip_safe = False,
    include_package_data = True,

    name = 'kelvinline',
    version = '0.0.1',
    description = 'Kelvin line source displacements by closed form and by quadrature.',
    long_description = description,
    long_description_content_type = 'text/markdown',

    license = 'MIT',
    platforms = ['any'],
    classifiers = [
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Intended Audience :: Science/Research',
        'Operating System :: OS Independent',
        'Operating System :: POSIX',
        'Topic :: Software Development',
        'Topic :: Scientific/Engineering :: Physics',
        'Topic :: Scientific/Engineering :: Mathematics',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
    ]
)
