# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""SPDX 2.x document model: property tables, adapter and JSON loader."""

from .log import InvalidInput
from .model import DocumentNode, NodeAdapter


# Type of untyped nested objects found in a document
UNKNOWN_TYPE = "Object"

# Properties per type. The value names the type of nested objects
# (or of the elements of a collection of objects), None for plain values.
SPDX_PROPERTIES = {
    "SpdxDocument": {
        "SPDXID": None,
        "spdxVersion": None,
        "name": None,
        "dataLicense": None,
        "comment": None,
        "documentNamespace": None,
        "creationInfo": "CreationInfo",
        "externalDocumentRefs": "ExternalDocumentRef",
        "hasExtractedLicensingInfos": "ExtractedLicensingInfo",
        "annotations": "Annotation",
        "documentDescribes": None,
        "packages": "Package",
        "files": "File",
        "snippets": "Snippet",
        "relationships": "Relationship",
    },
    "CreationInfo": {
        "comment": None,
        "created": None,
        "creators": None,
        "licenseListVersion": None,
    },
    "ExternalDocumentRef": {
        "externalDocumentId": None,
        "checksum": "Checksum",
        "spdxDocument": None,
    },
    "ExtractedLicensingInfo": {
        "licenseId": None,
        "extractedText": None,
        "name": None,
        "comment": None,
        "seeAlsos": None,
    },
    "Checksum": {
        "algorithm": None,
        "checksumValue": None,
    },
    "Annotation": {
        "annotationDate": None,
        "annotationType": None,
        "annotator": None,
        "comment": None,
    },
    "Package": {
        "SPDXID": None,
        "name": None,
        "versionInfo": None,
        "packageFileName": None,
        "supplier": None,
        "originator": None,
        "downloadLocation": None,
        "filesAnalyzed": None,
        "packageVerificationCode": "PackageVerificationCode",
        "checksums": "Checksum",
        "homepage": None,
        "sourceInfo": None,
        "licenseConcluded": None,
        "licenseInfoFromFiles": None,
        "licenseDeclared": None,
        "licenseComments": None,
        "copyrightText": None,
        "summary": None,
        "description": None,
        "comment": None,
        "externalRefs": "ExternalRef",
        "attributionTexts": None,
        "primaryPackagePurpose": None,
        "releaseDate": None,
        "builtDate": None,
        "validUntilDate": None,
        "annotations": "Annotation",
        "hasFiles": None,
    },
    "PackageVerificationCode": {
        "packageVerificationCodeValue": None,
        "packageVerificationCodeExcludedFiles": None,
    },
    "ExternalRef": {
        "referenceCategory": None,
        "referenceType": None,
        "referenceLocator": None,
        "comment": None,
    },
    "File": {
        "SPDXID": None,
        "fileName": None,
        "fileTypes": None,
        "checksums": "Checksum",
        "licenseConcluded": None,
        "licenseInfoInFiles": None,
        "licenseComments": None,
        "copyrightText": None,
        "comment": None,
        "noticeText": None,
        "fileContributors": None,
        "attributionTexts": None,
        "annotations": "Annotation",
    },
    "Snippet": {
        "SPDXID": None,
        "name": None,
        "snippetFromFile": None,
        "ranges": "SnippetRange",
        "licenseConcluded": None,
        "licenseInfoInSnippets": None,
        "licenseComments": None,
        "copyrightText": None,
        "comment": None,
        "attributionTexts": None,
        "annotations": "Annotation",
    },
    "SnippetRange": {
        "startPointer": "RangePointer",
        "endPointer": "RangePointer",
    },
    "RangePointer": {
        "reference": None,
        "offset": None,
        "lineNumber": None,
    },
    "Relationship": {
        "spdxElementId": None,
        "relationshipType": None,
        "relatedSpdxElement": None,
        "comment": None,
    },
}


class SpdxAdapter(NodeAdapter):
    """NodeAdapter for SPDX documents.

    No collection in an SPDX document is ordered: the same packages,
    checksums or relationships listed in a different order describe
    the same document.
    """

    def __init__(self):
        super(SpdxAdapter, self).__init__(
            unordered=("*",),
            declared={t: set(props) for t, props in SPDX_PROPERTIES.items()},
        )


def _load_value(value, type_id):
    if isinstance(value, dict):
        return _load_node(value, type_id or UNKNOWN_TYPE)
    if isinstance(value, list):
        return [_load_value(v, type_id) for v in value]
    return value


def _load_node(data, type_id):
    properties = SPDX_PROPERTIES.get(type_id, {})
    node = DocumentNode(type_id)
    for key, value in data.items():
        node[key] = _load_value(value, properties.get(key))
    return node


def load_spdx_document(data, type_id="SpdxDocument"):
    """Convert parsed SPDX JSON into a tree of typed DocumentNodes.

    Nested objects get their type from the property holding them;
    objects under properties the tables do not know become UNKNOWN_TYPE.
    """
    if not isinstance(data, dict):
        raise InvalidInput("Expected a JSON object for {}, got {}".format(
            type_id, type(data).__name__))
    return _load_node(data, type_id)
