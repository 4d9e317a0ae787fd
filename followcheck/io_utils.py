"""
File I/O utilities for loading follower/following list files
Every loader returns raw text, one entry per line, for the handle extractor
"""

import io
import json
import logging
from typing import Any, Dict, Iterable, List

import openpyxl
import pandas as pd

from .detect import HandleColumnDetector


logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = ['txt', 'csv', 'tsv', 'xlsx', 'json']


class FileHandler:
    def __init__(self):
        self.detector = HandleColumnDetector()

    def load_list_file(self, uploaded_file) -> str:
        """
        Load a list file and return its entries as newline-separated text
        Accepts anything with a name and getvalue(), like a Streamlit upload
        """
        file_extension = uploaded_file.name.lower().split('.')[-1]

        if file_extension == 'txt':
            return self._load_txt(uploaded_file)
        elif file_extension == 'csv':
            return self._load_delimited(uploaded_file, sep=',', kind='CSV')
        elif file_extension == 'tsv':
            return self._load_delimited(uploaded_file, sep='\t', kind='TSV')
        elif file_extension == 'xlsx':
            return self._load_excel(uploaded_file)
        elif file_extension == 'json':
            return self._load_json(uploaded_file)
        else:
            raise ValueError(f"Unsupported file format: {file_extension}")

    def _read_text(self, uploaded_file) -> str:
        uploaded_file.seek(0)
        file_content = uploaded_file.getvalue()

        if isinstance(file_content, bytes):
            # utf-8-sig drops the BOM some spreadsheet exports prepend
            file_content = file_content.decode('utf-8-sig')

        return file_content

    def _load_txt(self, uploaded_file) -> str:
        try:
            return self._read_text(uploaded_file)
        except UnicodeDecodeError as e:
            raise ValueError(f"Error reading TXT file: {str(e)}")

    def _load_delimited(self, uploaded_file, sep: str, kind: str) -> str:
        """Load CSV or TSV without assuming a header row"""
        try:
            buffer = io.StringIO(self._read_text(uploaded_file))
            df = pd.read_csv(
                buffer,
                sep=sep,
                header=None,
                dtype=str,  # Keep everything as strings for handle processing
                keep_default_na=False,  # Don't convert to NaN
                skip_blank_lines=True,
            )
        except pd.errors.EmptyDataError:
            return ""
        except (UnicodeDecodeError, pd.errors.ParserError) as e:
            raise ValueError(f"Error reading {kind} file: {str(e)}")

        return self._column_text(df)

    def _load_excel(self, uploaded_file) -> str:
        """Load the first sheet holding any values"""
        try:
            uploaded_file.seek(0)
            excel_buffer = io.BytesIO(uploaded_file.getvalue())

            # Use openpyxl for streaming read
            workbook = openpyxl.load_workbook(excel_buffer, read_only=True, data_only=True)
        except Exception as e:
            raise ValueError(f"Error reading Excel file: {str(e)}")

        try:
            for sheet_name in workbook.sheetnames:
                rows = [
                    ['' if value is None else str(value) for value in row]
                    for row in workbook[sheet_name].iter_rows(values_only=True)
                ]
                if not rows:
                    continue

                text = self._column_text(pd.DataFrame(rows, dtype=str))
                if text:
                    return text
                logger.debug("Sheet %s has no handle values, skipping", sheet_name)
        except Exception as e:
            raise ValueError(f"Error reading Excel file: {str(e)}")
        finally:
            workbook.close()

        return ""

    def _column_text(self, df: pd.DataFrame) -> str:
        pos = self.detector.detect_handle_column(df)
        if pos is None:
            return ""

        column = df.iloc[:, pos]
        if self.detector.has_header(df):
            column = column.iloc[1:]

        values = [v.strip() for v in column.astype(str) if v.strip()]
        return "\n".join(values)

    def _load_json(self, uploaded_file) -> str:
        """
        Load an Instagram "Download your information" JSON export
        Accepts a list of relationship entries or an object of such lists
        """
        try:
            json_data = json.loads(self._read_text(uploaded_file))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ValueError(f"Error reading JSON file: {str(e)}")

        if isinstance(json_data, list):
            entries = json_data
        elif isinstance(json_data, dict):
            entries = []
            for value in json_data.values():
                if isinstance(value, list):
                    entries.extend(value)
        else:
            raise ValueError("JSON format not supported - expected array of entries or object with arrays")

        return "\n".join(self._json_values(entries))

    def _json_values(self, entries: Iterable[Any]) -> List[str]:
        values = []
        skipped = 0

        for entry in entries:
            if isinstance(entry, str):
                values.append(entry)
                continue
            if not isinstance(entry, dict):
                skipped += 1
                continue

            found = self._entry_values(entry)
            if found:
                values.extend(found)
            else:
                skipped += 1

        if skipped:
            logger.warning("Skipped %d JSON entries without a username", skipped)

        return values

    def _entry_values(self, entry: Dict[str, Any]) -> List[str]:
        items = entry.get('string_list_data') or []
        if not isinstance(items, list):
            items = []

        # Only non-empty string values count
        found = [
            item['value'] for item in items
            if isinstance(item, dict) and isinstance(item.get('value'), str) and item['value']
        ]
        title = entry.get('title')
        if not found and isinstance(title, str) and title:
            found = [title]
        return found


def load_list_file(uploaded_file) -> str:
    return FileHandler().load_list_file(uploaded_file)
