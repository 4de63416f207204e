"""Title banner shown when the game starts."""

TITLE = r"""
  __       _           _
 / _| __ _| |__  _   _| | __ _
| |_ / _` | '_ \| | | | |/ _` |
|  _| (_| | |_) | |_| | | (_| |
|_|  \__,_|_.__/ \__,_|_|\__,_|

A very small adventure. Type HELP if you get stuck.
"""
