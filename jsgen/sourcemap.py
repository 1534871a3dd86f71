"""Source Map revision 3 output for generated fragments."""
import json
import logging

from jsgen.fragment import walk

logger = logging.getLogger(__name__)

_BASE64 = 'ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/'
_VLQ_BASE_SHIFT = 5
_VLQ_BASE_MASK = (1 << _VLQ_BASE_SHIFT) - 1
_VLQ_CONTINUATION_BIT = 1 << _VLQ_BASE_SHIFT


def encode_vlq(value):
    vlq = ((-value) << 1) + 1 if value < 0 else value << 1
    encoded = []
    while True:
        digit = vlq & _VLQ_BASE_MASK
        vlq >>= _VLQ_BASE_SHIFT
        if vlq:
            digit |= _VLQ_CONTINUATION_BIT
        encoded.append(_BASE64[digit])
        if not vlq:
            return ''.join(encoded)


class SourceMapGenerator:
    def __init__(self, file=None, source_root=None):
        self.file = file
        self.source_root = source_root
        self.sources = []
        self.names = []
        self.mappings = []
        self.sources_content = {}

    def _index(self, table, value):
        try:
            return table.index(value)
        except ValueError:
            table.append(value)
            return len(table) - 1

    def add_mapping(self, generated, original=None, source=None, name=None):
        """Record a mapping.

        ``generated`` and ``original`` are ``(line, column)`` pairs with
        1-based lines and 0-based columns. A mapping without ``original``
        marks generated code that has no counterpart in the input.
        """
        if original is not None:
            self._index(self.sources, source)
            if name is not None:
                self._index(self.names, name)
        self.mappings.append((generated[0], generated[1], source, original, name))

    def set_source_content(self, source, content):
        self._index(self.sources, source)
        self.sources_content[source] = content

    def serialize_mappings(self):
        previous_line = 1
        previous_column = 0
        previous_source = 0
        previous_original_line = 0
        previous_original_column = 0
        previous_name = 0
        previous = None
        result = []

        for mapping in sorted(self.mappings, key=lambda m: (m[0], m[1])):
            line, column, source, original, name = mapping
            if line != previous_line:
                previous_column = 0
                result.append(';' * (line - previous_line))
                previous_line = line
            elif previous is not None:
                if mapping == previous:
                    continue
                result.append(',')
            previous = mapping

            result.append(encode_vlq(column - previous_column))
            previous_column = column
            if original is None:
                continue

            index = self.sources.index(source)
            result.append(encode_vlq(index - previous_source))
            previous_source = index
            result.append(encode_vlq(original[0] - 1 - previous_original_line))
            previous_original_line = original[0] - 1
            result.append(encode_vlq(original[1] - previous_original_column))
            previous_original_column = original[1]
            if name is not None:
                index = self.names.index(name)
                result.append(encode_vlq(index - previous_name))
                previous_name = index

        return ''.join(result)

    def to_dict(self):
        result = {
            'version': 3,
            'sources': list(self.sources),
            'names': list(self.names),
            'mappings': self.serialize_mappings(),
        }
        if self.file is not None:
            result['file'] = self.file
        if self.source_root is not None:
            result['sourceRoot'] = self.source_root
        if self.sources_content:
            result['sourcesContent'] = [self.sources_content.get(source) for source in self.sources]
        return result

    def __str__(self):
        return json.dumps(self.to_dict())


def to_string_with_source_map(fragment, file=None, source_root=None):
    """Flatten ``fragment`` while recording where each positioned chunk came from."""
    code = []
    source_map = SourceMapGenerator(file=file, source_root=source_root)
    line = 1
    column = 0
    mapping_active = False
    last_original = None

    for chunk, owner in walk(fragment):
        code.append(chunk)
        original = None
        if owner is not None and owner.has_position():
            original = (owner.source, owner.line, owner.column, owner.name)

        if original is not None:
            if original != last_original:
                source_map.add_mapping((line, column), original[1:3], original[0], original[3])
            last_original = original
            mapping_active = True
        elif mapping_active:
            source_map.add_mapping((line, column))
            last_original = None
            mapping_active = False

        last = len(chunk) - 1
        for index, ch in enumerate(chunk):
            if ch == '\n':
                line += 1
                column = 0
                if index == last:
                    last_original = None
                    mapping_active = False
                elif mapping_active:
                    source_map.add_mapping((line, column), original[1:3], original[0], original[3])
            else:
                column += 1

    logger.debug('mapped %d segments across %d lines', len(source_map.mappings), line)
    return {'code': ''.join(code), 'map': source_map}
