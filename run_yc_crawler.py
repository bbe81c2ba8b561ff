#!/usr/bin/env python3
"""
YC Founders Crawler Runner
Wrapper script to run the YC crawler from the organized structure
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), 'src'))

from yc_founders_crawler import main

if __name__ == "__main__":
    main()
