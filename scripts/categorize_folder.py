# scripts/categorize_folder.py
import sys
import os
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import argparse
import json
from collections import Counter

from modules.category_registry import category_names
from modules.document_processor import DocumentDecodeError, process_document
from modules.keyword_extractor import DEFAULT_TOP_N


def iter_files(folder):
    for root, dirs, files in os.walk(folder):
        dirs.sort()
        for name in sorted(files):
            yield os.path.join(root, name)


def categorize_folder(folder, top_n=DEFAULT_TOP_N, output_path=None):
    """Categorize every file under folder; returns (counts, records)."""
    counts = Counter()
    records = []

    for path in iter_files(folder):
        with open(path, 'rb') as f:
            data = f.read()
        try:
            result = process_document(data, os.path.basename(path), top_n)
        except DocumentDecodeError as e:
            print(f"Skipping {path}: {e.reason}")
            continue
        counts[result['category'].value] += 1
        records.append({
            'path': os.path.relpath(path, folder),
            'category': result['category'].value,
            'keywords': result['keywords'],
        })

    if output_path:
        with open(output_path, 'w', encoding='utf-8') as f:
            for record in records:
                f.write(json.dumps(record) + '\n')

    return counts, records


def main(argv=None):
    parser = argparse.ArgumentParser(description="Sort files into semantic categories by keyword scoring.")
    parser.add_argument('folder', help="Folder to scan recursively")
    parser.add_argument('--top-n', type=int, default=DEFAULT_TOP_N, help="Number of keywords to extract per file")
    parser.add_argument('--output', help="Write one JSON line per file to this path")
    args = parser.parse_args(argv)

    if not os.path.isdir(args.folder):
        print("Folder not found:", args.folder)
        return 1

    counts, records = categorize_folder(args.folder, args.top_n, args.output)

    print("Categorization Summary:")
    print("=======================")
    print(f"Total files: {len(records)}")
    for name in category_names():
        print(f"  {name.value}: {counts.get(name.value, 0)}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
