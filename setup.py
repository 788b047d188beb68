from setuptools import setup, find_packages

# Read requirements.txt
def read_requirements(filename="requirements.txt"):
    with open(filename) as f:
        return [
            line.strip() 
            for line in f
            if line.strip() and not line.startswith("#")
        ]

# Read README
with open('README.md') as f:
    long_description = f.read()

setup(
    name="context-engine",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=read_requirements(),
    extras_require={
        'dev': [
            'pytest>=7.0.0',
            'pytest-asyncio>=0.21.0',
        ],
    },
    python_requires='>=3.9',
    description="Conversation context processing pipeline with an input template stage",
    long_description=long_description,
    long_description_content_type='text/markdown',
    author="Charles Feinn",
    author_email="charles@appsimple.io",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.9",
    ],
)
