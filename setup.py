from setuptools import setup, find_packages


setup(
    name='x25519key',
    version='0.1.0',
    description='X25519KeyAgreementKey2019 key pairs: fingerprints, '
                'Ed25519 conversion and Diffie-Hellman shared secrets',
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.8',
    install_requires=['cryptography>=35.0.0', 'PyNaCl>=1.4.0', 'base58>=2.1.0'],
    extras_require={'test': ['pytest']},
    entry_points={'console_scripts': ['x25519key=x25519key.__main__:main']},
)
