# ruff: noqa: D100
from setuptools import setup

setup(
    name='python-redux-demos',
    version='0.1.0',
    description='Redux-style state core of the pets, movies and recipes demos',
    packages=['redux_demos', 'redux_demos_pytest', 'redux_demos_pytest.fixtures'],
    python_requires='>=3.11',
    install_requires=[
        'python-immutable>=1.0.0',
        'typing-extensions>=4.9.0',
    ],
    extras_require={
        'test': [
            'pytest>=8.1.1',
            'pytest-mock>=3.14.0',
        ],
    },
)
