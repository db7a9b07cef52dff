#!/usr/bin/env python3
"""clustools CLI 工具

命令行工具,对成对距离矩阵进行聚类。

用法:
    python cli.py cluster -f scores.txt -s hierarchical_cutoff -d 0.5
    python cli.py cluster --help   # 查看帮助
"""

from clustools.cli.main import cli

if __name__ == "__main__":
    cli()
