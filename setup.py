from setuptools import setup, find_packages
import re

# Read version from salaryslip/__init__.py
with open('salaryslip/__init__.py') as f:
    version = re.search(r'^__version__ = ["\']([^"\']+)["\']', f.read(), re.MULTILINE).group(1)

setup(
    name='salary-slip',
    version=version,
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'PyYAML>=6.0',
        'pydantic>=2.0.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
    },
    author='Personal',
    description='Salary slip component calculations: basic salary, transportation allowance, danger pay.',
    python_requires='>=3.10',
)
