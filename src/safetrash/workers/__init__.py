# Filename: __init__.py
# Author: Rich Lewis @RichLewis007
# Description: Worker components package. Exports the dispatcher that performs or
#              previews the trash operation for a validated path.

__all__ = ["dispatcher"]
