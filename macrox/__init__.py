"""macrox command-line interface.

Feeds text into macro expansion engine (`libmacrox`) and prints expanded result.
"""
