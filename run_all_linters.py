#!/usr/bin/env python3
"""統一的檢查腳本，執行所有 linter、格式化工具與測試。

依序執行：
1. Black 格式化檢查
2. isort 匯入排序檢查
3. Ruff 靜態檢查
4. Pylint 靜態分析（deployment_info 套件）
5. pytest 單元測試

加上 --fix 時，Black / isort / Ruff 會直接修正檔案而非只檢查。
"""

from pathlib import Path
import subprocess
import sys

ROOT = Path(__file__).parent


def run_command(cmd: list[str], description: str) -> tuple[bool, str]:
    """執行命令並返回成功狀態和輸出。"""
    print(f"\n{'='*60}")
    print(f"執行: {description}")
    print(f"命令: {' '.join(cmd)}")
    print("=" * 60)

    try:
        result = subprocess.run(cmd, capture_output=True, text=True, check=False, cwd=ROOT)
    except OSError as e:
        print(f"❌ 執行錯誤: {e}")
        return False, str(e)

    success = result.returncode == 0
    output = result.stdout + result.stderr
    print("✅ 成功" if success else "❌ 失敗")
    if output.strip():
        print("\n輸出:")
        print(output)
    return success, output


def build_commands(fix: bool) -> list[tuple[list[str], str]]:
    """依 `fix` 決定檢查模式或修正模式的命令清單。"""
    py = sys.executable
    black = [py, "-m", "black", "."] + ([] if fix else ["--check"])
    isort = [py, "-m", "isort", "."] + ([] if fix else ["--check-only"])
    ruff = [py, "-m", "ruff", "check", "."] + (["--fix"] if fix else [])
    return [
        (black, "Black 格式化"),
        (isort, "isort 匯入排序"),
        (ruff, "Ruff 靜態檢查"),
        ([py, "-m", "pylint", "deployment_info"], "Pylint 靜態分析"),
        ([py, "-m", "pytest", "-q"], "pytest 單元測試"),
    ]


def main() -> None:
    """主函數：依序執行所有檢查並輸出總結。"""
    fix = "--fix" in sys.argv[1:]
    results = [(desc, *run_command(cmd, desc)) for cmd, desc in build_commands(fix)]

    print(f"\n{'='*60}")
    print("總結報告")
    print("=" * 60)
    for description, success, _ in results:
        print(f"{description}: {'✅ 通過' if success else '❌ 失敗'}")

    all_passed = all(success for _, success, _ in results)
    print(f"\n整體結果: {'✅ 全部通過' if all_passed else '❌ 有錯誤'}")
    sys.exit(0 if all_passed else 1)


if __name__ == "__main__":
    main()
