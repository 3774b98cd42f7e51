#!/usr/bin/env python3
# Turn a file into a C string variable.
# Usage: file2stringvar.py varname <data_file >src.c
# https://jameshfisher.com/2016/11/30/c-multiline-literal/
import argparse
import contextlib
import logging
import sys

logger = logging.getLogger(__name__)

ESCAPES = {
  ord('\\'): '\\\\',
  ord('"'): '\\"',
  ord('\n'): '\\n',
  ord('\t'): '\\t',
  ord('\r'): '\\r',
  ord('\f'): '\\f',
  ord('\v'): '\\v',
  ord('\b'): '\\b',
  ord('\a'): '\\a',
}


def escape_line(line):
  """Render one line as a double-quoted C string literal.

  Bytes outside printable ASCII become three-digit octal escapes, so a
  digit following them in the data is never taken as part of the escape.
  A str is encoded as UTF-8 first.
  """
  if isinstance(line, str):
    line = line.encode('utf-8')
  out = []
  prev = None
  for b in line:
    if b in ESCAPES:
      out.append(ESCAPES[b])
    elif b == ord('?') and prev == ord('?'):
      # trigraph avoidance
      out.append('\\?')
    elif 0x20 <= b <= 0x7e:
      out.append(chr(b))
    else:
      out.append(f'\\{b:03o}')
    prev = b
  return '"' + ''.join(out) + '"'


def file2stringvar(name, fr, fw):
  """Write a `const char name[]` declaration holding every line of fr to fw.

  Returns the number of lines written.
  """
  logger.debug('generating %r', name)
  _ = fw.write(f'const char {name}[] = \\\n')
  count = 0
  for line in fr:
    _ = fw.write(f'  {escape_line(line)} \\\n')
    count += 1
  _ = fw.write(';\n')
  logger.debug('%s: %d lines', name, count)
  return count


def open_stream(path, mode, std):
  if path == '-':
    return contextlib.nullcontext(std)
  if 'b' in mode:
    return open(path, mode)
  return open(path, mode, encoding='utf-8')


def main(argv=None):
  """Run the command line.

  The first argument argparse does not claim is the variable name, taken
  verbatim even when it starts with a dash. Later leftovers are ignored.
  Put `--` before a name that collides with one of the options.
  """
  parser = argparse.ArgumentParser(
    usage='%(prog)s [-h] [-i INPUT] [-o OUTPUT] [-v] [name]',
    description='Turn a file into a C string variable',
    allow_abbrev=False)
  parser.add_argument('-i', '--input', default='-',
                      help='file to embed (default: standard input)')
  parser.add_argument('-o', '--output', default='-',
                      help='where to write the declaration (default: standard output)')
  parser.add_argument('-v', '--verbose', action='store_true',
                      help='log progress to standard error')
  args, rest = parser.parse_known_args(argv)
  if rest and rest[0] == '--':
    rest = rest[1:]
  name = rest[0] if rest else ''

  FORMAT = '%(asctime)-15s %(message)s'
  logging.basicConfig(format=FORMAT, stream=sys.stderr)
  logger.setLevel(logging.DEBUG if args.verbose else logging.NOTSET)

  with open_stream(args.input, 'rb', sys.stdin.buffer) as fr, \
       open_stream(args.output, 'w', sys.stdout) as fw:
    file2stringvar(name, fr, fw)
  return 0


if __name__ == '__main__':
  sys.exit(main())
