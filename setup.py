from setuptools import find_packages
from setuptools import setup

setup(
    author='Jeffrey Finkelstein',
    author_email='jeffrey.finkelstein@gmail.com',
    #classifiers=[],
    description='Naive Bayes real/spam classifier with Laplace smoothing',
    #download_url='',
    entry_points={'console_scripts': ['nbclassifier = nbclassifier.cli:main']},
    extras_require={'test': ['pytest']},
    install_requires=['blinker', 'lockfile'],
    #include_package_data=True,
    #keywords=[],
    #license='',
    #long_description='',
    name='nbclassifier',
    platforms='any',
    packages=find_packages(exclude=['tests']),
    python_requires='>=3.8',
    url='http://github.com/jfinkels/nbclassifier',
    version='0.0.1.dev0',
    #zip_safe=False
)
