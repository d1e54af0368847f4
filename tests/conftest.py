# Shared pytest configuration. Qt runs headless via the offscreen platform; the
# variable must be set before pytest-qt creates the QApplication.

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
