# Configuration file for the Sphinx documentation builder.
#
# http://www.sphinx-doc.org/en/master/config

import os
import sys
sys.path.insert(0, os.path.abspath('../'))


# -- Project information -----------------------------------------------------

project = 'SimpleTimer'
copyright = '2026, SimpleTimer Developers'
author = 'SimpleTimer Developers'


# -- General configuration ---------------------------------------------------

extensions = [
    'sphinx.ext.autodoc',
]

exclude_patterns = ['_build', 'Thumbs.db', '.DS_Store']

html_theme = 'sphinx_rtd_theme'


# -- Magic to run sphinx-apidoc automatically -----------------------------

def run_apidoc(_):
    """Call sphinx-apidoc on simpletimer module"""
    from sphinx.ext.apidoc import main as apidoc_main
    apidoc_main(['-e', '-o', 'source/apidoc', '../simpletimer'])


def build_state_machine_diagrams(_):
    """Draw the Timer lifecycle"""
    from simpletimer.timer import Timer
    Timer.build_state_graph('timer_state_machine.png')


def setup(app):
    """ Add hooks into Sphinx to autogen documentation """

    app.connect('builder-inited', run_apidoc)
    app.connect('builder-inited', build_state_machine_diagrams)
