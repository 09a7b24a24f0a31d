# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

"""Interfaces and exceptions of the translation catalog components."""

from pomo.interfaces.catalog import *
from pomo.interfaces.translation import *
