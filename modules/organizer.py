# modules/organizer.py
import math
import threading
import uuid
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP

from modules import monitor
from modules.category_registry import CATEGORIES, FALLBACK_CATEGORY, parse_category_name
from modules.document_processor import (
    DEFAULT_MAX_PDF_PAGES,
    DocumentDecodeError,
    process_document,
)
from modules.keyword_extractor import DEFAULT_TOP_N

PREVIEW_CHARS = 5000

_SIZE_UNITS = ['B', 'KB', 'MB', 'GB']


def format_file_size(num_bytes):
    """Human readable size, e.g. 1536 -> '1.5 KB'. Halves round up."""
    if num_bytes <= 0:
        return "0 B"
    k = 1024
    i = min(int(math.floor(math.log(num_bytes) / math.log(k))), len(_SIZE_UNITS) - 1)
    value = (Decimal(num_bytes) / Decimal(k ** i)).quantize(Decimal('0.1'), rounding=ROUND_HALF_UP)
    if value == value.to_integral_value():
        value = int(value)
    return f"{value} {_SIZE_UNITS[i]}"


def percent_complete(done, total):
    return int(math.floor(done / total * 100 + 0.5))


class OrganizedFile:
    """An uploaded file together with its extracted keywords and category.

    Keywords and category are computed once at ingestion and never rescored.
    """

    def __init__(self, name, size, type, content, keywords, category, id=None, uploaded_at=None):
        self.id = id or uuid.uuid4().hex
        self.name = name
        self.size = size
        self.type = type or 'text/plain'
        self.content = content
        self.keywords = list(keywords)
        self.category = category
        self.uploaded_at = uploaded_at or datetime.now()

    def matches(self, query):
        q = query.lower()
        return (
            q in self.name.lower()
            or any(q in kw for kw in self.keywords)
            or q in self.content.lower()
        )

    def to_dict(self, include_content=False):
        data = {
            'id': self.id,
            'name': self.name,
            'size': self.size,
            'size_display': format_file_size(self.size),
            'type': self.type,
            'keywords': list(self.keywords),
            'category': self.category.value,
            'uploaded_at': self.uploaded_at.isoformat(),
        }
        if include_content:
            data['content'] = self.content
        return data

    def preview(self, max_chars=PREVIEW_CHARS):
        data = self.to_dict()
        data['content'] = self.content[:max_chars]
        data['truncated'] = len(self.content) > max_chars
        data['content_size_display'] = format_file_size(len(self.content))
        return data


class FileOrganizer:
    """
    In-memory state of one organizer session.

    State changes only through the command methods (add_files, remove_file,
    set_selected_category, set_search_query, clear). Folders, stats and the
    filtered list are recomputed from the record list on every read.
    """

    def __init__(self, top_n=DEFAULT_TOP_N, max_pdf_pages=DEFAULT_MAX_PDF_PAGES):
        self.top_n = top_n
        self.max_pdf_pages = max_pdf_pages
        self._files = []
        self._lock = threading.Lock()
        self.selected_category = None
        self.search_query = ''
        # Upload batch id -> [files done, files total], guarded by _lock
        self._batches = {}

    # --- Commands ---

    def add_files(self, uploads, progress_callback=None):
        """
        Process (filename, data, mimetype) uploads one at a time in order.
        Returns (processed, failed); failed holds (filename, message) pairs.
        """
        uploads = list(uploads)
        total = len(uploads)
        processed = []
        failed = []

        batch_id = uuid.uuid4().hex
        with self._lock:
            self._batches[batch_id] = [0, total]
        try:
            for i, (filename, data, mimetype) in enumerate(uploads):
                try:
                    result = process_document(data, filename, self.top_n, self.max_pdf_pages)
                except DocumentDecodeError as e:
                    monitor.log_processing_error(filename, e.reason)
                    failed.append((filename, str(e)))
                else:
                    processed.append(OrganizedFile(
                        name=filename,
                        size=len(data),
                        type=mimetype,
                        content=result['text'],
                        keywords=result['keywords'],
                        category=result['category'],
                    ))

                with self._lock:
                    self._batches[batch_id][0] = i + 1
                if progress_callback is not None:
                    progress_callback(percent_complete(i + 1, total), filename)
            with self._lock:
                self._files.extend(processed)
        finally:
            with self._lock:
                del self._batches[batch_id]

        if processed:
            plural = 's' if len(processed) > 1 else ''
            monitor.log_info(f"Organized {len(processed)} file{plural} into folders")
        return processed, failed

    def remove_file(self, file_id):
        with self._lock:
            remaining = [f for f in self._files if f.id != file_id]
            removed = len(remaining) != len(self._files)
            self._files = remaining
        if removed:
            monitor.log_info(f"File {file_id} removed")
        return removed

    def set_selected_category(self, name):
        self.selected_category = None if name is None else parse_category_name(name)

    def set_search_query(self, query):
        self.search_query = query or ''

    def clear(self):
        with self._lock:
            self._files = []
        self.selected_category = None
        self.search_query = ''

    # --- Derived views ---

    def files(self):
        with self._lock:
            return list(self._files)

    def get_file(self, file_id):
        for organized in self.files():
            if organized.id == file_id:
                return organized
        return None

    def filtered_files(self):
        result = self.files()
        if self.selected_category is not None:
            result = [f for f in result if f.category == self.selected_category]
        if self.search_query.strip():
            result = [f for f in result if f.matches(self.search_query)]
        return result

    def folders(self):
        files = self.files()
        folders = []
        for category in CATEGORIES:
            members = [f for f in files if f.category == category.name]
            # Others is shown only when something landed in it
            if not members and category.name == FALLBACK_CATEGORY:
                continue
            folders.append({
                'name': category.name.value,
                'icon': category.icon,
                'color': category.color,
                'files': members,
            })
        return folders

    def stats(self):
        files = self.files()
        total_size = sum(f.size for f in files)
        categories = []
        for category in CATEGORIES:
            count = sum(1 for f in files if f.category == category.name)
            if count > 0:
                categories.append({'name': category.name.value, 'count': count})
        return {
            'total_files': len(files),
            'total_size': total_size,
            'total_size_display': format_file_size(total_size),
            'categories': categories,
        }

    def processing_state(self):
        """Progress over every upload batch still running, as one percentage."""
        with self._lock:
            done = sum(batch[0] for batch in self._batches.values())
            total = sum(batch[1] for batch in self._batches.values())
        if not total:
            return {'processing': False, 'progress': 0}
        return {'processing': True, 'progress': percent_complete(done, total)}

    @property
    def is_processing(self):
        return self.processing_state()['processing']

    @property
    def processing_progress(self):
        return self.processing_state()['progress']
