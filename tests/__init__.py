"""
Root test package.

Only this directory carries an __init__.py, so shared helpers can be imported as
`tests.helpers...`. Test subdirectories are namespace packages (PEP 420) and
need no __init__.py of their own.
"""
