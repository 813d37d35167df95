"""
The canonical list-structured search, as a stack of dictionaries.

Scope zero is the global scope: it is there from the start and never leaves.
Declarations land in the innermost scope; lookups and assignments
work outward from there and act on the first binding they find.
"""
from typing import Optional
from .ontology import Phrase
from .runtime import VALUE, UndefinedVariable, ScopeError

class Environment:
	_scopes: list[dict[str, VALUE]]

	def __init__(self):
		self._scopes = [{}]

	def depth(self) -> int: return len(self._scopes)

	def push_scope(self):
		self._scopes.append({})

	def pop_scope(self, site:Optional[Phrase]=None):
		if len(self._scopes) == 1:
			raise ScopeError(site, "Cannot leave the global scope.")
		self._scopes.pop()

	def define(self, name:str, value:VALUE):
		self._scopes[-1][name] = value

	def _find(self, name:str) -> Optional[dict]:
		for scope in reversed(self._scopes):
			if name in scope: return scope

	def holds(self, name:str) -> bool:
		return self._find(name) is not None

	def get(self, name:str) -> Optional[VALUE]:
		scope = self._find(name)
		if scope is not None: return scope[name]

	def assign(self, name:str, value:VALUE, site:Optional[Phrase]=None) -> VALUE:
		""" Overwrite the nearest binding of name; answer its previous value. """
		scope = self._find(name)
		if scope is None: raise UndefinedVariable(site, name)
		previous = scope[name]
		scope[name] = value
		return previous
