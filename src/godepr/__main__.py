"""godeprのコマンドラインエントリポイント。"""

if __name__ == "__main__":
    import sys

    from godepr.cli import main

    sys.exit(main())
