"""Ordered, duplicate-free collection of clues the player has found."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional


@dataclass
class ClueNode:
    """二叉搜索树节点"""
    text: str
    left: Optional[ClueNode] = None
    right: Optional[ClueNode] = None


class ClueIndex:
    """线索索引 - 按字典序保存已收集的线索，重复插入无效"""

    def __init__(self) -> None:
        self.root: Optional[ClueNode] = None
        self._size = 0

    def insert(self, text: Optional[str]) -> None:
        """
        插入一条线索

        Empty text is ignored and inserting a clue that is already present
        leaves the tree untouched.
        """
        if not text:
            return

        if self.root is None:
            self.root = ClueNode(text)
            self._size += 1
            return

        node = self.root
        while True:
            if text == node.text:
                return
            if text < node.text:
                if node.left is None:
                    node.left = ClueNode(text)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = ClueNode(text)
                    break
                node = node.right
        self._size += 1

    def in_order(self) -> Iterator[str]:
        """Yield clue texts in ascending order. Each call starts a fresh walk."""
        stack: List[ClueNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.text
            node = node.right

    def __iter__(self) -> Iterator[str]:
        return self.in_order()

    def __contains__(self, text: object) -> bool:
        if not isinstance(text, str):
            return False
        node = self.root
        while node is not None:
            if text == node.text:
                return True
            node = node.left if text < node.text else node.right
        return False

    def __len__(self) -> int:
        return self._size

    @property
    def is_empty(self) -> bool:
        return self.root is None
