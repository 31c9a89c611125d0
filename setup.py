import setuptools

with open("requirements.txt", "r") as requirements:
    reqs = requirements.read().splitlines()

setuptools.setup(
    name='SelectKit',
    version='0.1.0',
    description="Searchable single and multi select widgets with an interactive terminal frontend",
    author="",
    author_email="",
    packages=setuptools.find_packages(include=['SelectKit*']),
    include_package_data=True,
    install_requires=reqs,
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.9',
    entry_points={
        'console_scripts': [
            "selectkit = SelectKit.__main__:main"
        ],
    },
)
