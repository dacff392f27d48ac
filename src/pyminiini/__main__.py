# -*- encoding: utf-8 -*-
# @File   : __main__.py
# @Time   : 2024/10/13 00:05:48
# @Author : Kariko Lin

import sys

from .cli import main

sys.exit(main())
