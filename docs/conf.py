# decobox documentation build configuration file.

import decobox

# Add any Sphinx extension module names here, as strings. They can be
# extensions coming with Sphinx (named 'sphinx.ext.*') or your custom ones.
extensions = ['sphinx.ext.autodoc', 'sphinx.ext.intersphinx']

# The suffix of source filenames.
source_suffix = '.rst'

# The master toctree document.
master_doc = 'index'

# General information about the project.
project = 'decobox'
copyright = 'decobox contributors'

# The full version, including alpha/beta/rc tags.
release = decobox.__version__

# The short X.Y version.
version = release

# List of patterns, relative to source directory, that match files and
# directories to ignore when looking for source files.
exclude_patterns = ['_build']

# The theme to use for HTML and HTML Help pages.
html_theme = 'furo'

# Output file base name for HTML help builder.
htmlhelp_basename = 'decoboxdoc'

# Example configuration for intersphinx: refer to the Python standard library.
intersphinx_mapping = {
    'python': ('https://docs.python.org/3/', None),
    'pydyf': ('https://doc.courtbouillon.org/pydyf/stable/', None),
    'tinycss2': ('https://doc.courtbouillon.org/tinycss2/stable/', None),
}
