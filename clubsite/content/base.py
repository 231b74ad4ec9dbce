"""
Base content source interface for clubsite.

This module defines the abstract interface every provider of tenant, page, post
and form content must implement. Implementations absorb their own transport
failures and answer with None or an empty result instead of raising.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Union

from ..models import FormDefinition, FormSubmissionResult, Homepage, Page, Post, PostList, Tenant


class ContentSource(ABC):
    """
    Abstract base class for all content sources.
    
    The web layer only talks to this interface, so the live CMS client and the
    built-in defaults are interchangeable.
    """
    
    @abstractmethod
    def get_tenant(self, code: str) -> Optional[Tenant]:
        """
        Look up a tenant by its code.
        
        Args:
            code: The tenant code (e.g. 'kallitechnia')
            
        Returns:
            The tenant, or None if unknown or unavailable
        """
        pass
        
    @abstractmethod
    def get_homepage(self, tenant_id: str) -> Optional[Homepage]:
        """Retrieve the homepage record of a tenant."""
        pass

    @abstractmethod
    def get_page_by_slug(self, slug: str, tenant_id: str) -> Optional[Page]:
        """Retrieve a content page by slug."""
        pass

    @abstractmethod
    def get_posts(self, tenant_id: str, limit: int = 10, page: int = 1) -> PostList:
        """Retrieve one page of posts, newest first."""
        pass

    @abstractmethod
    def get_post_by_slug(self, slug: str, tenant_id: str) -> Optional[Post]:
        """Retrieve a single post by slug."""
        pass

    @abstractmethod
    def get_form(self, slug_or_id: Union[str, int]) -> Optional[FormDefinition]:
        """Retrieve a form definition by slug or numeric id."""
        pass

    @abstractmethod
    def submit_form(self, form_slug: str, values: Dict[str, Any]) -> FormSubmissionResult:
        """Submit visitor values for a form."""
        pass
