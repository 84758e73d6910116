# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

import sys
import os


# -- Project information -----------------------------------------------------
# https://www.sphinx-doc.org/en/master/usage/configuration.html#project-information

project = "sketchpad"
copyright = "2024, Sketchpad developers"
author = "Sketchpad developers"

# -- General configuration ---------------------------------------------------
# https://www.sphinx-doc.org/en/master/usage/configuration.html#general-configuration


sys.path.append(os.path.abspath("../../"))

extensions = [
    "sphinx_copybutton",
    "sphinx.ext.autodoc",
    "sphinx_click",
    "myst_parser",
    "sphinx_design",
    "sphinx_termynal",
]

# The GUI stack is not needed to document the history engine
autodoc_mock_imports = [
    "PyQt5",
    "matplotlib",
]

templates_path = ["_templates"]
exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]


# -- Options for HTML output -------------------------------------------------
# https://www.sphinx-doc.org/en/master/usage/configuration.html#options-for-html-output

html_theme = "sphinx_book_theme"
html_static_path = ["_static"]

copybutton_prompt_text = r">>> |\.\.\. |\$ |In \[\d*\]: | {2,5}\.\.\.: | {5,8}: "
copybutton_prompt_is_regexp = True

html_title = "Sketchpad"

myst_enable_extensions = ["colon_fence"]
