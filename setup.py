from glob import glob
from setuptools import setup


setup(
    name='bigrpn',
    use_scm_version={
        # Outside a git checkout, e.g. an unpacked sdist.
        'fallback_version': '0.1.0',
    },
    description='Postfix calculator over arbitrary-precision integers',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=['bigrpn'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    python_requires='>=3.6',
    setup_requires=[
        'setuptools_scm',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'coverage',
            'hypothesis',
            'flake8',
            'bandit',
            'mypy',
            'safety',
        ],
    },
    scripts=glob('bin/*'),
    license='ISC',
)
