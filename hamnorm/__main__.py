# Copyright 2026 The HamNorm Authors - All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import sys

from .cli import main

sys.exit(main())
