"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='tsprinter',
	version='0.1.0',
	packages=['tsprinter'],
	entry_points={
		'console_scripts': ["tsprinter = tsprinter.cmdline:main"],
	},
	license='MIT',
	description='Build TypeScript type declarations as Python objects and print them as source text',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.12",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Topic :: Software Development :: Code Generators",
		"Environment :: Console",
	],
	python_requires='>=3.10',
	install_requires=[
		"booze-tools>=0.6.2.1",
	]
)
