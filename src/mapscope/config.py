""" Mapping context configuration. A mapping context names the mapping
    engine a connection uses and carries the options and conditions that
    engine is configured with. Contexts are stored as JSON files, one per
    context, under the ``mapping`` subdirectory of :func:`directory`.
"""

import logging
import os
import threading
import types

from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple

from . import json
from .base import ConfigurationError


logger = logging.getLogger(__name__)

_cache = dict()
_cache_lock = threading.Lock()


@dataclass(frozen=True)
class MappingContext:
    """ Configuration for one mapping engine instance.

        :ivar mapping_engine: Name or alias of the engine, e.g. ``JavaScript``.
        :ivar options: Engine-specific options, arbitrary JSON values.
        :ivar incoming_conditions: Named conditions checked before mapping
            inbound messages.
        :ivar outgoing_conditions: Named conditions checked before mapping
            outbound messages.
        :ivar content_type_blocklist: Content types that are never handed
            to the engine.
    """

    mapping_engine: str
    options: Mapping[str, object] = field(default_factory=dict, hash=False)
    incoming_conditions: Mapping[str, str] = field(default_factory=dict, hash=False)
    outgoing_conditions: Mapping[str, str] = field(default_factory=dict, hash=False)
    content_type_blocklist: Tuple[str, ...] = ()

    def __post_init__(self):

        # Contexts are shared through the cache; the mappings are wrapped
        # read-only so one holder cannot change them under another.

        for name in ('options', 'incoming_conditions', 'outgoing_conditions'):
            value = types.MappingProxyType(dict(getattr(self, name)))
            object.__setattr__(self, name, value)

        object.__setattr__(self, 'content_type_blocklist', tuple(self.content_type_blocklist))


    @classmethod
    def from_json(cls, block):
        """ Create a :class:`MappingContext` from a decoded JSON object.
            The ``mappingEngine`` key is required; everything else is
            optional.
        """

        if not isinstance(block, dict):
            raise ConfigurationError('mapping context must be a JSON object')

        try:
            engine = block['mappingEngine']
        except KeyError:
            raise ConfigurationError('mapping context is missing mappingEngine') from None

        if not isinstance(engine, str) or engine == '':
            raise ConfigurationError('mappingEngine must be a non-empty string')

        options = block.get('options') or dict()
        incoming = block.get('incomingConditions') or dict()
        outgoing = block.get('outgoingConditions') or dict()
        blocklist = block.get('contentTypeBlocklist') or ()

        for name, value in (('options', options), ('incomingConditions', incoming), ('outgoingConditions', outgoing)):
            if not isinstance(value, dict):
                raise ConfigurationError(name + ' must be a JSON object')

        if isinstance(blocklist, str):
            blocklist = [item.strip() for item in blocklist.split(',')]

        return cls(
            mapping_engine=engine,
            options=dict(options),
            incoming_conditions=dict(incoming),
            outgoing_conditions=dict(outgoing),
            content_type_blocklist=tuple(item for item in blocklist if item),
        )


    def to_json(self):

        block = dict()
        block['mappingEngine'] = self.mapping_engine
        block['options'] = dict(self.options)

        if self.incoming_conditions:
            block['incomingConditions'] = dict(self.incoming_conditions)
        if self.outgoing_conditions:
            block['outgoingConditions'] = dict(self.outgoing_conditions)
        if self.content_type_blocklist:
            block['contentTypeBlocklist'] = list(self.content_type_blocklist)

        return block


    def is_blocked(self, content_type: Optional[str]) -> bool:
        """ Return True if *content_type* is in the blocklist. MIME
            parameters (anything after a semicolon) and case are ignored.
        """

        if not content_type:
            return False

        media_type = content_type.split(';', 1)[0].strip().lower()

        for blocked in self.content_type_blocklist:
            if media_type == blocked.split(';', 1)[0].strip().lower():
                return True

        return False


# end of class MappingContext



def directory(default=None):
    """ Return the directory location where we should be loading and/or saving
        mapping contexts. This defaults to ``$HOME/.mapscope``, but can be
        overridden by calling this method with a valid path, or by setting
        the ``MAPSCOPE_HOME`` environment variable. Note that changes to the
        environment variable will be ignored unless it is set prior to the
        first invocation of this method.
    """

    if default is not None:
        default = str(default)
        default = os.path.expandvars(default)

        if os.path.isabs(default):
            pass
        else:
            raise ValueError('the default directory must be an absolute path')

        if os.path.exists(default):
            pass
        else:
            os.makedirs(default, mode=0o775)

        os.environ['MAPSCOPE_HOME'] = default
        directory.found = default


    found = directory.found

    if found is not None:
        return found

    try:
        found = os.environ['MAPSCOPE_HOME']
    except KeyError:
        pass
    else:
        directory.found = found
        return found

    try:
        home = os.environ['HOME']
    except KeyError:
        raise RuntimeError('MAPSCOPE_HOME and HOME environment variables not set, cannot determine mapscope configuration directory')

    found = os.path.join(home, '.mapscope')

    directory.found = found
    return found

directory.found = None



def _filename(name):

    if not name or os.sep in name or name.startswith('.'):
        raise ConfigurationError('invalid mapping context name: ' + repr(name))

    return os.path.join(directory(), 'mapping', name + '.json')



def get(name):
    """ Return the :class:`MappingContext` stored under *name*, loading it
        from disk the first time it is requested.
    """

    _cache_lock.acquire()
    try:
        try:
            return _cache[name]
        except KeyError:
            pass

        context = load(name)
        _cache[name] = context
        return context
    finally:
        _cache_lock.release()



def load(name):
    """ Read and parse the mapping context stored under *name*, bypassing
        the cache.
    """

    filename = _filename(name)

    try:
        with open(filename, 'rb') as reader:
            raw_json = reader.read()
    except FileNotFoundError:
        raise ConfigurationError('no mapping context named ' + repr(name) + ' in ' + os.path.dirname(filename)) from None

    try:
        block = json.loads(raw_json)
    except json.DecodeError as e:
        raise ConfigurationError('invalid JSON in ' + filename + ': ' + str(e)) from e

    logger.debug('loaded mapping context %r from %s', name, filename)
    return MappingContext.from_json(block)



def save(name, context):
    """ Write *context* to disk under *name*, replacing any previous
        context of the same name, and update the cache.
    """

    filename = _filename(name)
    target_directory = os.path.dirname(filename)

    if os.path.exists(target_directory):
        pass
    else:
        os.makedirs(target_directory, mode=0o775)

    raw_json = json.dumps(context.to_json())

    # Write to a temporary file and rename, so a concurrent reader never
    # sees a partially written file.

    temporary = filename + '.tmp'

    try:
        with open(temporary, 'wb') as writer:
            writer.write(raw_json)
        os.replace(temporary, filename)
    finally:
        if os.path.exists(temporary):
            os.remove(temporary)

    logger.debug('saved mapping context %r to %s', name, filename)

    _cache_lock.acquire()
    _cache[name] = context
    _cache_lock.release()



def remove(name):
    """ Delete the mapping context stored under *name*, if any. """

    filename = _filename(name)

    try:
        os.remove(filename)
    except FileNotFoundError:
        pass
    else:
        logger.debug('removed mapping context %r', name)

    _cache_lock.acquire()
    _cache.pop(name, None)
    _cache_lock.release()



def clear_cache():
    _cache_lock.acquire()
    _cache.clear()
    _cache_lock.release()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
