from setuptools import setup, find_packages

setup(
    name='assetpack',
    version='0.1.0',
    py_modules=['assetpack', 'packer'],
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.8',
    install_requires=[
        'lark',
        'pydantic>=2',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'assetpack = assetpack:main',
        ],
    },
)
