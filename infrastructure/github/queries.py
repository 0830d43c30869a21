_BRANCH_REF_FIELDS = """
    name
    target {
      ... on Commit {
        history(first: 1) {
          nodes {
            __typename
            oid
          }
        }
      }
    }
"""

GET_REPOSITORY_QUERY = f"""
query GetRepository($owner: String!, $repo: String!, $qualifiedName: String!, $includeRef: Boolean!) {{
  repository(owner: $owner, name: $repo) {{
    nameWithOwner
    defaultBranchRef {{{_BRANCH_REF_FIELDS}    }}
    ref(qualifiedName: $qualifiedName) @include(if: $includeRef) {{{_BRANCH_REF_FIELDS}    }}
  }}
}}
""".strip()

CREATE_COMMIT_ON_BRANCH_MUTATION = """
mutation CreateCommitOnBranch($input: CreateCommitOnBranchInput!) {
  createCommitOnBranch(input: $input) {
    commit {
      oid
      url
    }
  }
}
""".strip()
