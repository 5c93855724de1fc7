################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of Nearow
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Real-time rowing stroke rate estimation from accelerometer magnitudes."""
