'''
导出季型色板为 JSON 的脚本。

该脚本会执行以下操作：
1. 构建色板注册表（配置了 PALETTE_FILE 时从该文件加载，否则使用内置色板）。
2. 把每个参考色连同预计算的 Lab 值写成 JSON。
3. 输出文件可直接作为 PALETTE_FILE 使用（lab 字段在加载时会被忽略）。

用法：
    python scripts/export_palette.py [output.json]
不指定输出路径时打印到标准输出。
'''
import json
import sys
from pathlib import Path

# 将项目根目录添加到 Python 路径中
# 这是为了能够正确地从脚本中导入 'seasonal_color' 包
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from seasonal_color.service.palette.registry import PaletteConfigError, get_palette_registry


def main(argv: list[str]) -> int:
    """主函数，执行色板导出流程"""
    try:
        registry = get_palette_registry()
    except PaletteConfigError as e:
        print(f"错误：色板构建失败: {e}", file=sys.stderr)
        return 1

    payload = json.dumps(registry.to_dict(include_lab=True), ensure_ascii=False, indent=2)

    if not argv:
        print(payload)
        return 0

    output = Path(argv[0])
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(payload + "\n", encoding="utf-8")
    print(f"--- 已导出 {len(registry.micro_seasons)} 个细分季型、{len(registry)} 个参考色 → {output} ---")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
