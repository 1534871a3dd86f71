import logging
import re

import esprima
from django.conf import settings
from esprima.error_handler import Error as EsprimaError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from jsgen import FORMAT_MINIFY, CodeGenerationError, attach_comments, generate
from jsgen.options import update_deeply

from .serializer import AstParseSerializer, RegenerateSerializer, ScriptParseSerializer

logger = logging.getLogger(__name__)

# Options that carry Python callables and are never taken from a request.
SERVER_ONLY_OPTIONS = ('parse', 'codegenFactory')


def parse_script(source, options=None, module=False):
    parser = esprima.parseModule if module else esprima.parseScript
    return parser(source, options or {}).toDict()


def to_json_tree(value):
    """Drop values JSON cannot carry, such as compiled regular expressions."""
    if isinstance(value, dict):
        return {key: to_json_tree(item) for key, item in value.items()}
    if isinstance(value, list):
        return [to_json_tree(item) for item in value]
    if isinstance(value, re.Pattern):
        return None
    return value


def parse_literal(raw):
    return esprima.parseScript(raw).toDict()


def error_response(message, data=None):
    return Response({
        'status': 0,
        'message': message,
        'data': data or []
    }, status=status.HTTP_400_BAD_REQUEST)


def build_options(options=None, minify=False):
    """Layer the request's options over the configured defaults."""
    defaults = getattr(settings, 'ASTTOJS', {}).get('DEFAULT_OPTIONS', {})
    merged = update_deeply({}, defaults)
    update_deeply(merged, {k: v for k, v in (options or {}).items() if k not in SERVER_ONLY_OPTIONS})
    if minify:
        update_deeply(merged, {'format': FORMAT_MINIFY})
    merged['parse'] = parse_literal
    return merged


class ScriptParseViewSet(APIView):
    serializer_class = ScriptParseSerializer

    def post(self, request, *args, **kwargs):
        serializer = self.serializer_class(data=request.data)
        if not serializer.is_valid():
            return error_response('incorrect data', serializer.errors)

        data = serializer.validated_data
        option = {'jsx': data['jsx'], 'range': data['range'], 'loc': data['loc'],
                  'tolerant': data['tolerant'], 'tokens': data['tokens'], 'comment': data['comment']}
        try:
            output_ast = parse_script(data['input_js'], option, module=data['module'])
        except EsprimaError as e:
            logger.warning('scriptparse rejected input: %s', e)
            return error_response(str(e))

        return Response({
            'out_ast': to_json_tree(output_ast)
        })


class AstParseViewSet(APIView):
    serializer_class = AstParseSerializer

    def post(self, request, *args, **kwargs):
        serializer = self.serializer_class(data=request.data)
        if not serializer.is_valid():
            return error_response('incorrect data', serializer.errors)

        data = serializer.validated_data
        options = build_options(data['options'], data['minify'])
        if options.get('sourceMap'):
            options['sourceMapWithCode'] = True

        try:
            output = generate(data['input_ast'], options)
        except CodeGenerationError as e:
            logger.warning('astparse failed: %s', e)
            return error_response(str(e))
        except (KeyError, TypeError, AttributeError) as e:
            # a node is missing a field its kind requires
            logger.warning('astparse received a malformed tree: %r', e)
            return error_response('malformed AST: %s' % e)

        if isinstance(output, dict):
            return Response({
                'output_js': output['code'],
                'map': output['map'].to_dict() if output['map'] is not None else None
            })
        return Response({
            'output_js': output
        })


class RegenerateViewSet(APIView):
    serializer_class = RegenerateSerializer

    def post(self, request, *args, **kwargs):
        serializer = self.serializer_class(data=request.data)
        if not serializer.is_valid():
            return error_response('incorrect data', serializer.errors)

        data = serializer.validated_data
        source = data['input_js']
        try:
            tree = parse_script(source, {'range': True, 'tokens': True, 'comment': True},
                                module=data['module'])
        except EsprimaError as e:
            logger.warning('regenerate rejected input: %s', e)
            return error_response(str(e))

        options = {'comment': data['comment']}
        if data['comment']:
            tree = attach_comments(tree, tree.get('comments', []), tree.get('tokens', []))
        if data['preserve_blank_lines']:
            options['sourceCode'] = source
            options['format'] = {'preserveBlankLines': True}

        try:
            output_js = generate(tree, build_options(options, data['minify']))
        except CodeGenerationError as e:
            logger.warning('regenerate failed: %s', e)
            return error_response(str(e))

        return Response({
            'output_js': output_js
        })
