# This source code is part of the mmtfwriter package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "mmtfwriter.structure"
__author__ = "The mmtfwriter contributors"
__all__ = ["EntityRecord", "resolve_entities"]

from .error import ChainReferenceError


class EntityRecord:
    """
    An entity as it is encoded, i.e. with chain indices instead of
    chain references.

    Parameters
    ----------
    chain_indices : list of int
        The positions of the entity chains in the structure-wide chain
        list.
    sequence : str
        The one-letter sequence of the entity.
    description : str or None
        The entity description.
    details : str or None
        Additional details on the entity.
    """

    def __init__(self, chain_indices, sequence, description, details):
        self.chain_indices = chain_indices
        self.sequence = sequence
        self.description = description
        self.details = details


def resolve_entities(all_chains, entity_infos):
    """
    Replace the chain references of entities with chain indices.

    Parameters
    ----------
    all_chains : list of Chain
        The chains of all models in document order.
    entity_infos : iterable of EntityInfo
        The entities.

    Returns
    -------
    entities : list of EntityRecord
        One record for each entity, in the same order as
        `entity_infos`.
        The chain indices are given in the order of the chains in the
        entity.
        The sequence is taken from the first chain of the entity,
        it is empty if the entity has no chains.

    Raises
    ------
    ChainReferenceError
        If a chain of an entity is not part of `all_chains`.
    """
    # Chains are identified by identity, not by name
    chain_positions = {}
    for i, chain in enumerate(all_chains):
        chain_positions.setdefault(id(chain), i)

    entities = []
    for entity_index, entity_info in enumerate(entity_infos):
        chain_indices = []
        for chain in entity_info.chains:
            try:
                chain_indices.append(chain_positions[id(chain)])
            except KeyError:
                raise ChainReferenceError(
                    f"Chain '{chain.name}' (internal ID '{chain.asym_id}') "
                    f"of entity {entity_index} "
                    f"({entity_info.description!r}) is not part of the "
                    f"structure"
                )
        if len(entity_info.chains) > 0:
            sequence = entity_info.chains[0].sequence
        else:
            sequence = ""
        entities.append(EntityRecord(
            chain_indices, sequence,
            entity_info.description, entity_info.details
        ))
    return entities
