#!/usr/bin/env python3
"""
Точка входа для домена Parsing (строки PDF -> транспортная заявка).

Использование:
    # Разобрать файл со строками (.txt - строка на строку)
    python scripts/parse_order.py path/to/order_lines.txt

    # JSON: ["line", ...] или {"lines": [...], "filename": "order.pdf"}
    python scripts/parse_order.py path/to/order_lines.json --save

    # Все *_lines.txt / *_lines.json из директории
    python scripts/parse_order.py --dir data/input
"""

import sys
import argparse
import json
from pathlib import Path
from typing import List, Optional, Tuple

from loguru import logger

# Добавляем корень проекта в путь
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config.settings import INPUT_DIR, OUTPUT_DIR
from transport_orders.parsing import NoMatchingFormatError, ParsingComponentFactory
from transport_orders.parsing.domain import ParsingDataFormatError


def load_lines(path: Path) -> Tuple[List[str], Optional[str]]:
    """
    Читает строки документа.

    Returns:
        (строки, имя исходного PDF или None)
    """
    if path.suffix.lower() != ".json":
        with open(path, "r", encoding="utf-8") as f:
            return f.read().splitlines(), path.with_suffix(".pdf").name

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    filename = None
    if isinstance(data, dict):
        filename = data.get("filename")
        data = data.get("lines")

    if not isinstance(data, list) or not all(isinstance(line, str) for line in data):
        raise ParsingDataFormatError(f"Ожидается список строк: {path}", component="parse_order")

    return data, filename


def find_line_files(search_dir: Path) -> List[Path]:
    return sorted(
        p for p in search_dir.rglob("*")
        if p.is_file() and p.suffix.lower() in (".txt", ".json")
    )


def parse_file(dispatcher, path: Path, save: bool) -> bool:
    try:
        lines, filename = load_lines(path)
        order = dispatcher.dispatch(lines, filename)
    except (NoMatchingFormatError, ParsingDataFormatError) as e:
        print(f"  [ERROR] {path.name}: {e}")
        return False

    output = json.dumps(order, ensure_ascii=False, indent=2)

    if save:
        OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
        result_file = OUTPUT_DIR / f"{path.stem}_order.json"
        with open(result_file, "w", encoding="utf-8") as f:
            f.write(output)
        print(f"  [SAVED] {result_file}")
    else:
        print(output)

    return True


def main():
    """Главная функция запуска домена Parsing."""
    parser = argparse.ArgumentParser(description="Transport order PDF lines parser")
    parser.add_argument("path", nargs="?", help="Файл со строками (.txt / .json)")
    parser.add_argument("--dir", help="Директория с файлами строк")
    parser.add_argument("--keywords", help="YAML с ключевыми словами стратегий")
    parser.add_argument("--save", action="store_true", help=f"Сохранить результат в {OUTPUT_DIR}")
    parser.add_argument("-v", "--verbose", action="store_true", help="DEBUG логирование")
    args = parser.parse_args()

    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else "WARNING")

    if args.path:
        files = [Path(args.path)]
    else:
        search_dir = Path(args.dir) if args.dir else INPUT_DIR
        if not search_dir.is_dir():
            print(f"[ERROR] Директория не найдена: {search_dir}")
            sys.exit(1)
        files = find_line_files(search_dir)

    if not files:
        print("[WARNING] Нет файлов для обработки")
        sys.exit(0)

    dispatcher = ParsingComponentFactory.create_dispatcher(keywords=args.keywords)

    success_count = sum(parse_file(dispatcher, path, args.save) for path in files)

    if len(files) > 1:
        print(f"\n  ИТОГИ: {success_count}/{len(files)} успешно обработано")

    if success_count != len(files):
        sys.exit(1)


if __name__ == "__main__":
    main()
