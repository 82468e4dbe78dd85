# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""ERP Access: role-scoped permission service for the manufacturing ERP."""

__version__ = "0.1.0"
