from vsskit.combiner import combine_public_shares, combine_secret_shares
from vsskit.dealer import SecretShare, distribute_secret, extract_public_share
from vsskit.keys import add_secrets, combine_publics, extract_public
from vsskit.shareholder import parse_feldman_packet

NR_PARTIES = 4
THRESHOLD = 3


def test_distributed_key_generation(group):
    dealings = [distribute_secret(group, NR_PARTIES, THRESHOLD) for _ in range(NR_PARTIES)]
    distributions = [sharing.create_feldman_packets() for _, sharing in dealings]

    # party j verifies the packet addressed to it by every dealer and sums them
    aggregates = []
    for j in range(1, NR_PARTIES + 1):
        received = [
            parse_feldman_packet(group, distribution.commitments, distribution.packets[j - 1])
            for distribution in distributions
        ]
        assert all(share.index == j for share in received)
        aggregates.append(SecretShare(add_secrets(group, [share.value for share in received]), j))

    joint_secret = add_secrets(group, [secret for secret, _ in dealings])
    joint_public = combine_publics(group, [extract_public(group, secret) for secret, _ in dealings])
    assert extract_public(group, joint_secret) == joint_public

    assert combine_secret_shares(group, aggregates[:THRESHOLD], threshold=THRESHOLD) == joint_secret
    assert combine_secret_shares(group, aggregates[1:], threshold=THRESHOLD) == joint_secret

    publics = [extract_public_share(group, share) for share in aggregates]
    assert combine_public_shares(group, publics[1:], threshold=THRESHOLD) == joint_public
    # the dealers' constant-term commitments also add up to the joint public key
    assert combine_publics(group, [d.commitments[0] for d in distributions]) == joint_public
