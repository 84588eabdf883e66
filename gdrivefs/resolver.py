# resolver.py
import logging
from typing import List, Optional

from .api import ROOT_ID, DriveApiClient, ensure_success, items_from
from .exceptions import PathNotFoundError
from .paths import DrivePath
from .storage.dto import RemoteObject


class PathResolver:
    """
    Turns slash-delimited paths into Drive file IDs by walking from the root,
    one "children of parent" listing per segment. Nothing is cached: every
    call re-resolves the whole path.
    """

    def __init__(self, api: DriveApiClient):
        self.api = api

    def children(self, parent_id: str) -> Optional[List[RemoteObject]]:
        """Lists the children of a folder, or returns None if the folder is gone."""
        response = self.api.list_children(parent_id)
        if response.status_code == 404:
            return None
        ensure_success(response)
        return items_from(response)

    def resolve(self, path: Optional[DrivePath]) -> Optional[str]:
        """
        Returns the ID of the object at `path`, or None when no path was given.

        A trailing empty segment stops the walk and returns the folder reached
        so far. Raises PathNotFoundError at the first missing segment.
        """
        if path is None:
            return None

        parent_id = ROOT_ID
        for segment in path.segments:
            if segment == "":
                return parent_id

            children = self.children(parent_id)
            if children is None:
                raise PathNotFoundError(str(path), segment)

            matches = [child for child in children if child.title == segment]
            if not matches:
                raise PathNotFoundError(str(path), segment)
            if len(matches) > 1:
                # First match in listing order wins.
                logging.debug(
                    f"{len(matches)} objects named '{segment}' under '{parent_id}', using '{matches[0].id}'"
                )

            logging.debug(f"Resolved '{segment}' under '{parent_id}' to '{matches[0].id}'")
            parent_id = matches[0].id
        return parent_id
