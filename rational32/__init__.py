# SPDX-FileCopyrightText: 2025 rational32 contributors
# SPDX-License-Identifier: Apache-2.0

from .errors import *
from .checked import *
from .rational import *
from .textio import parse, render, read, write
